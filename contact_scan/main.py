import argparse
import json
import logging
import sys
from pathlib import Path

from .config import LOG_LEVEL
from .models import ContactForm
from .oauth import OAuthTokenProvider
from .actions import scan_and_fill, create_contact, SCAN_FAILED
from .pipeline.scan import scan_message
from .utils.email_utils import parse_email, get_effective_message, EmailMessageSource

logger = logging.getLogger(__name__)


def handle_email(email_obj):
    original = get_effective_message(email_obj)
    result = scan_message(EmailMessageSource(original))
    return {
        "meta": {
            "from": original.get("From"),
            "to": original.get("To"),
            "subject": original.get("Subject"),
            "message_id": original.get("Message-ID"),
            "date": original.get("Date"),
        },
        "extraction": result.to_dict(),
    }


def process_file(path: Path, create: bool, token_provider=None) -> bool:
    logger.debug("scanning %s", path)
    try:
        email_obj = get_effective_message(parse_email(path.read_bytes()))
    except OSError as e:
        logger.exception("cannot read %s", path)
        print(SCAN_FAILED.format(e))
        return False
    form = ContactForm()
    status = scan_and_fill(EmailMessageSource(email_obj), form)
    print(json.dumps({"file": str(path), "form": form.to_dict()}, ensure_ascii=False))
    print(status.message)
    if not status.ok or not create:
        return status.ok
    status = create_contact(form, token_provider or OAuthTokenProvider())
    print(status.message)
    return status.ok


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="contact-scan",
        description="Extract name and French phone number from .eml files and create Outlook contacts.")
    parser.add_argument("files", nargs="+", type=Path, help=".eml files to scan")
    parser.add_argument("--create", action="store_true", help="create a contact via Microsoft Graph")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    token_provider = OAuthTokenProvider() if args.create else None
    ok = True
    for path in args.files:
        ok = process_file(path, args.create, token_provider) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
