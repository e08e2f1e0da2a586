import json
import os
import tempfile
import unittest

from fbs_rpc.config import ConfigError, GeneratorConfig, config_from_dict, load_config, validate_config


class TestConfigValidator(unittest.TestCase):
    def setUp(self):
        self.valid_config = {
            "languages": ["rust", "python"],
            "output_dir": "build/out",
            "strict": True,
            "services": ["MonsterStorage"],
        }

    def test_valid_config(self):
        errors = validate_config(self.valid_config)
        self.assertEqual(errors, [], f"Expected no errors, got: {errors}")

    def test_empty_config_is_valid(self):
        self.assertEqual(validate_config({}), [])

    def test_unknown_language(self):
        self.valid_config["languages"] = ["rust", "go"]
        errors = validate_config(self.valid_config)
        self.assertTrue(any("languages[1]" in e and "not in enum" in e for e in errors))

    def test_strict_must_be_boolean(self):
        self.valid_config["strict"] = 1
        errors = validate_config(self.valid_config)
        self.assertTrue(any("Expected boolean" in e for e in errors))

    def test_output_dir_must_be_string(self):
        self.valid_config["output_dir"] = ["a"]
        errors = validate_config(self.valid_config)
        self.assertTrue(any("Expected string" in e for e in errors))

    def test_unknown_field(self):
        self.valid_config["lang"] = ["rust"]
        errors = validate_config(self.valid_config)
        self.assertTrue(any("Unknown field 'lang'" in e for e in errors))

    def test_service_name_without_whitespace(self):
        self.valid_config["services"] = ["Monster Storage"]
        errors = validate_config(self.valid_config)
        self.assertTrue(any("does not match" in e for e in errors))

    def test_empty_and_duplicate_languages(self):
        self.assertTrue(validate_config({"languages": []}))
        errors = validate_config({"languages": ["rust", "rust"]})
        self.assertTrue(any("Duplicate" in e for e in errors))


class TestLoadConfig(unittest.TestCase):
    def _write(self, text):
        tmp = tempfile.NamedTemporaryFile(mode='w', delete=False, suffix='.json')
        tmp.write(text)
        tmp.close()
        self.addCleanup(os.unlink, tmp.name)
        return tmp.name

    def test_defaults(self):
        config = config_from_dict({})
        self.assertEqual(config, GeneratorConfig())
        self.assertEqual(config.languages, ["rust", "cpp", "python"])
        self.assertTrue(config.wants("Anything"))

    def test_load(self):
        path = self._write(json.dumps({"languages": ["cpp"], "services": ["A"]}))
        config = load_config(path)
        self.assertEqual(config.languages, ["cpp"])
        self.assertTrue(config.wants("A"))
        self.assertFalse(config.wants("B"))
        self.assertFalse(config.strict)

    def test_invalid_json(self):
        path = self._write("{not json")
        with self.assertRaises(ConfigError) as ctx:
            load_config(path)
        self.assertIn("Invalid JSON", ctx.exception.errors[0])

    def test_not_utf8(self):
        path = self._write("")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe{}")
        with self.assertRaises(ConfigError) as ctx:
            load_config(path)
        self.assertIn("Not valid UTF-8", ctx.exception.errors[0])

    def test_invalid_values_raise(self):
        path = self._write(json.dumps({"strict": "yes"}))
        with self.assertRaises(ConfigError):
            load_config(path)


if __name__ == '__main__':
    unittest.main()
