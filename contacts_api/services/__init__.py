from contacts_api.services.contact import ContactService
