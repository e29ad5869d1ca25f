"""
User actions: scan the current mail into the form, create the contact from the form.

Each action catches its own failure, logs it and returns one Status line;
nothing here raises to the caller.
"""
import logging

from .models import ContactForm, Status
from .pipeline.scan import scan_message
from .rest_worker import create_contact_on_graph

logger = logging.getLogger(__name__)

SCAN_OK = "Analyse terminée. Vérifie/édite si besoin puis clique sur “Créer le contact”."
SCAN_FAILED = "Échec de l’analyse : {}"
CREATE_FAILED = ("Impossible de créer le contact : {}"
                 "\nVérifie les scopes AAD (Contacts.ReadWrite) et la configuration SSO.")


def scan_and_fill(source, form: ContactForm) -> Status:
    logger.info("Analyse du message en cours…")
    try:
        result = scan_message(source)
    except Exception as e:
        logger.exception("scan failed")
        return Status(SCAN_FAILED.format(e), ok=False)
    form.apply(result)
    return Status(SCAN_OK, ok=True)


def _created_message(created) -> str:
    email = created.emailAddresses[0].address if created.emailAddresses else ""
    phone = created.businessPhones[0] if created.businessPhones else ""
    return f"Contact créé ✅\nNom: {created.displayName}\nEmail: {email or '-'}\nTel: {phone or '-'}"


def create_contact(form: ContactForm, token_provider, create=create_contact_on_graph) -> Status:
    """Create the contact from the form values as they are right now."""
    logger.info("Création du contact…")
    values = form.snapshot()
    try:
        token = token_provider.get_token()
        created = create(token, values.full_name, values.email, values.phone)
    except Exception as e:
        logger.exception("contact creation failed")
        return Status(CREATE_FAILED.format(e), ok=False)
    return Status(_created_message(created), ok=True)
