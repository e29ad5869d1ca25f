import unittest
from pathlib import Path
from email import message_from_binary_file
import json

from contact_scan.main import handle_email
from contact_scan.utils.email_utils import EmailMessageSource, extract_bodies, get_effective_message
from contact_scan.errors import BodyRetrievalError
from email.message import EmailMessage


EMAIL_DIR = Path(__file__).parent / "emails"  # contact_scan/tests/emails


def load_eml(path: Path):
    with path.open("rb") as f:
        return message_from_binary_file(f)


def deep_get(d, dotted_key, default=None):
    cur = d
    for part in dotted_key.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return default
    return cur


class TestEmailPipelineFromFiles(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not EMAIL_DIR.exists():
            raise AssertionError(f"Email fixture directory missing: {EMAIL_DIR}")

    def assert_subset(self, exp, got, ctx="$"):
        self.assertIsInstance(got, dict, f"{ctx} should be an object")
        for k, v in exp.items():
            self.assertIn(k, got, f"{ctx}.{k} missing from result")
            if isinstance(v, dict):
                self.assert_subset(v, got[k], f"{ctx}.{k}")
            else:
                self.assertEqual(v, got[k], f"{ctx}.{k} expected {v!r}, got {got[k]!r}")

    def test_all_emls(self):
        eml_files = sorted(EMAIL_DIR.glob("*.eml"))
        self.assertTrue(eml_files, f"No .eml files in {EMAIL_DIR}")

        for eml_path in eml_files:
            with self.subTest(email=eml_path.name):
                data = handle_email(load_eml(eml_path))

                self.assertIn("meta", data)
                self.assertEqual({"fullName", "phone", "email"}, set(data["extraction"]))
                # JSON-serialisable, no None values
                json.dumps(data, ensure_ascii=False)
                self.assertTrue(all(isinstance(v, str) for v in data["extraction"].values()))

                exp_path = eml_path.with_suffix(".expected.json")
                if not exp_path.exists():
                    continue
                with exp_path.open("r", encoding="utf-8") as f:
                    expected = json.load(f)
                # either { "path.to.field": value } or nested
                if all(isinstance(k, str) and "." in k for k in expected.keys()):
                    for dotted_key, exp_val in expected.items():
                        got = deep_get(data, dotted_key)
                        self.assertEqual(
                            exp_val, got,
                            msg=f"Expected {dotted_key} == {exp_val!r} in {eml_path.name}, got {got!r}"
                        )
                else:
                    self.assert_subset(expected, data)


class TestEmailMessageSource(unittest.TestCase):
    def _message(self, plain=None, html=None, sender="Anne Roy <anne@roy.fr>"):
        msg = EmailMessage()
        msg["From"] = sender
        if plain is not None:
            msg.set_content(plain)
        if html is not None:
            if plain is None:
                msg.set_content(html, subtype="html")
            else:
                msg.add_alternative(html, subtype="html")
        return msg

    def test_html_part_preferred(self):
        source = EmailMessageSource(self._message(plain="texte", html="<p>html</p>"))
        self.assertIn("<p>html</p>", source.get_body())

    def test_plain_part_is_escaped(self):
        source = EmailMessageSource(self._message(plain="Écrire à <anne@roy.fr> & co"))
        body = source.get_body()
        self.assertIn("&lt;anne@roy.fr&gt; &amp; co", body)

    def test_no_text_body(self):
        msg = EmailMessage()
        msg["From"] = "anne@roy.fr"
        msg.set_content(b"\x00\x01", maintype="application", subtype="octet-stream")
        with self.assertRaises(BodyRetrievalError):
            EmailMessageSource(msg).get_body()

    def test_sender(self):
        sender = EmailMessageSource(self._message(plain="x")).get_sender()
        self.assertEqual("anne@roy.fr", sender.email)
        self.assertEqual("Anne Roy", sender.name)

    def test_missing_from_header(self):
        msg = EmailMessage()
        msg.set_content("x")
        sender = EmailMessageSource(msg).get_sender()
        self.assertEqual("", sender.email)
        self.assertEqual("", sender.name)

    def test_attachments_are_skipped(self):
        msg = self._message(plain="corps")
        msg.add_attachment("06 12 34 56 78", filename="notes.txt")
        plain, html = extract_bodies(msg)
        self.assertEqual("corps\n", plain)
        self.assertIsNone(html)

    def test_message_without_embedded_original_is_kept(self):
        msg = self._message(plain="x")
        self.assertIs(msg, get_effective_message(msg))


if __name__ == "__main__":
    unittest.main()
