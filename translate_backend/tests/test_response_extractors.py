import unittest

from translate_backend.services.response_extractors import (
    extract_anthropic,
    extract_chat_completion,
    extract_deeplx,
    extract_gemini,
    extract_google_translate,
    extract_microsoft,
)
from translate_backend.utils.text_utils import redact_secret, strip_markdown


class TestResponseExtractors(unittest.TestCase):
    def test_chat_completion_strips_markdown(self):
        data = {"choices": [{"message": {"content": "**Bold** text"}}]}
        self.assertEqual(extract_chat_completion(data), "Bold text")

    def test_chat_completion_trims(self):
        data = {"choices": [{"message": {"role": "assistant", "content": "  你好，世界\n"}}]}
        self.assertEqual(extract_chat_completion(data), "你好，世界")

    def test_chat_completion_missing_fields(self):
        self.assertEqual(extract_chat_completion({}), "")
        self.assertEqual(extract_chat_completion({"choices": []}), "")
        self.assertEqual(extract_chat_completion({"choices": [{"message": {"content": None}}]}), "")
        self.assertEqual(extract_chat_completion(None), "")

    def test_gemini_concatenates_parts(self):
        data = {"candidates": [{"content": {"parts": [{"text": "Bonjour "}, {"text": "le monde"}]}}]}
        self.assertEqual(extract_gemini(data), "Bonjour le monde")
        self.assertEqual(extract_gemini({"candidates": []}), "")

    def test_anthropic_keeps_only_text_blocks(self):
        data = {
            "content": [
                {"type": "thinking", "thinking": "hmm"},
                {"type": "text", "text": "Hallo "},
                {"type": "text", "text": "Welt"},
            ]
        }
        self.assertEqual(extract_anthropic(data), "Hallo Welt")

    def test_deeplx_each_field_alone(self):
        for field in ("translatedText", "data", "translation", "text"):
            with self.subTest(field=field):
                self.assertEqual(extract_deeplx({field: "你好"}), "你好")

    def test_deeplx_prefers_first_non_empty(self):
        self.assertEqual(extract_deeplx({"code": 200, "translatedText": "", "data": "Hola"}), "Hola")
        self.assertEqual(extract_deeplx({"code": 200}), "")

    def test_microsoft(self):
        data = [{"translations": [{"text": "你好", "to": "zh-Hans"}]}]
        self.assertEqual(extract_microsoft(data), "你好")
        self.assertEqual(extract_microsoft([]), "")

    def test_google_translate(self):
        data = {"data": {"translations": [{"translatedText": "Ciao", "detectedSourceLanguage": "en"}]}}
        self.assertEqual(extract_google_translate(data), "Ciao")
        self.assertEqual(extract_google_translate({"data": {}}), "")


class TestTextUtils(unittest.TestCase):
    def test_strip_markdown(self):
        self.assertEqual(strip_markdown("# Title\n- item one\n`code` and *it*"), "Title\nitem one\ncode and it")
        self.assertEqual(strip_markdown("plain\n\nparagraph"), "plain\n\nparagraph")

    def test_redact_secret(self):
        self.assertEqual(redact_secret(None), "<none>")
        self.assertEqual(redact_secret("short"), "***")
        redacted = redact_secret("sk-abcdefghijklmnop")
        self.assertNotIn("abcdefghijklmnop", redacted)
        self.assertTrue(redacted.startswith("sk-"))


if __name__ == "__main__":
    unittest.main()
