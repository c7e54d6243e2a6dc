"""Tests for the dbmlavro command line and file conversion."""

import io
import json
import os
import shutil
import sys
import tempfile
import unittest
from unittest.mock import patch

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from dbmlavro.dbmlavro import main
from dbmlavro.dbmltoavro import build_config, convert_dbml_to_avro
from dbmlavro.errors import DuplicateNameError

CARDS_DBML = os.path.join(os.path.dirname(current_script_path), "dbml", "cards.dbml")


class TestConvertDbmlToAvro(unittest.TestCase):

    def setUp(self):
        self.out_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.out_dir, ignore_errors=True)

    def test_convert_dbml_to_avro(self):
        out_dir = os.path.join(self.out_dir, "schemas")
        written = convert_dbml_to_avro(CARDS_DBML, out_dir, namespace="com.example")
        self.assertEqual([os.path.join(out_dir, f"{name}.avsc") for name in ["Player", "Card", "Suit"]], written)
        with open(os.path.join(out_dir, "Suit.avsc"), "r", encoding="utf-8") as f:
            suit = json.load(f)
        self.assertEqual("com.example", suit["namespace"])
        self.assertEqual(["SPADES", "HEARTS", "DIAMONDS", "CLUBS"], suit["symbols"])

    def test_convert_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            convert_dbml_to_avro(os.path.join(self.out_dir, "missing.dbml"), self.out_dir)

    def test_convert_duplicate_table_names(self):
        dbml_path = os.path.join(self.out_dir, "dup.dbml")
        with open(dbml_path, "w", encoding="utf-8") as f:
            f.write("Table a.User {\n  id int\n}\n\nTable b.User {\n  name varchar\n}\n")
        out_dir = os.path.join(self.out_dir, "schemas")
        with self.assertRaises(DuplicateNameError):
            convert_dbml_to_avro(dbml_path, out_dir)
        self.assertFalse(os.path.exists(out_dir))


class TestPackageExports(unittest.TestCase):

    def test_lazy_exports(self):
        import dbmlavro
        from dbmlavro import Config, DbmlToAvro, Result

        self.assertIs(dbmlavro.DbmlToAvro, DbmlToAvro)
        translated = DbmlToAvro(Config.builder().build()).translate_dbml("Table T {\n  a int [not null]\n}")
        self.assertEqual([Result("T", '{\n  "type": "record",\n  "name": "T",\n'
                                      '  "fields": [\n    {"name": "a", "type": "int"}\n  ]\n}')], translated)
        self.assertTrue(callable(dbmlavro.convert_dbml_to_avro))
        self.assertEqual("int", dbmlavro.TypeMapper(dbmlavro.Config()).map("integer"))


class TestBuildConfig(unittest.TestCase):

    def test_type_mappings(self):
        config = build_config("com.example", 2, ["string=json", " long = int8 "])
        self.assertEqual("com.example", config.namespace)
        self.assertEqual(2, config.default_scale)
        self.assertIn("json", config.type_mappings["string"])
        self.assertIn("int8", config.type_mappings["long"])

    def test_invalid_type_mapping(self):
        with self.assertRaises(ValueError):
            build_config(type_mappings=["string"])


class TestMain(unittest.TestCase):

    def test_version(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            main(['--version'])
        self.assertTrue(stdout.getvalue().startswith('dbmlavro '))

    def test_print_schemas(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            main([CARDS_DBML, '--namespace', 'com.example'])
        schemas = [json.loads(text) for text in stdout.getvalue().strip().split('\n\n')]
        self.assertEqual(["Player", "Card", "Suit"], [s["name"] for s in schemas])

    def test_read_stdin(self):
        with patch('sys.stdin', io.StringIO("Table T {\n  a int [not null]\n}")), \
                patch('sys.stdout', new_callable=io.StringIO) as stdout:
            main([])
        self.assertEqual({"type": "record", "name": "T", "fields": [{"name": "a", "type": "int"}]},
                         json.loads(stdout.getvalue()))

    def test_write_schemas(self):
        out_dir = tempfile.mkdtemp()
        try:
            with patch('sys.stdout', new_callable=io.StringIO):
                main([CARDS_DBML, '--out', out_dir, '--default-scale', '1'])
            self.assertEqual(["Card.avsc", "Player.avsc", "Suit.avsc"], sorted(os.listdir(out_dir)))
        finally:
            shutil.rmtree(out_dir, ignore_errors=True)

    def test_error_exits(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            with self.assertRaises(SystemExit) as context:
                main([CARDS_DBML, '--namespace', 'com..example'])
        self.assertEqual(1, context.exception.code)
        self.assertIn("Invalid namespace", stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
