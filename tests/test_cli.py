"""Tests for the sprout command line interface."""

import contextlib
import io
import json
import os
import tempfile
import unittest

from sprout.cli import _main


def run_cli(*argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = _main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestVLQCommand(unittest.TestCase):
    def test_encode(self):
        code, out, _ = run_cli("vlq", "encode", "0", "-1", "1000000")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "ADgkh9B")

    def test_decode(self):
        code, out, _ = run_cli("vlq", "decode", "ADgkh9B")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "0 -1 1000000")

    def test_decode_error(self):
        code, _, err = run_cli("vlq", "decode", "A!")
        self.assertEqual(code, 1)
        self.assertIn("Error", err)

    def test_encode_requires_integers(self):
        code, _, err = run_cli("vlq", "encode", "x")
        self.assertEqual(code, 1)
        self.assertIn("Error", err)


class TestMappingsCommand(unittest.TestCase):
    def test_decode(self):
        code, out, _ = run_cli("mappings", "AAAA,KAAG;;IACE")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["0:0 -> 0:0", "0:5 -> 0:3", "2:4 -> 1:5"])


class TestSourcemapCommand(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        # An empty config keeps the test independent of any sprout.json above cwd
        self.config = os.path.join(self.root, "sprout.json")
        with open(self.config, "w", encoding="utf-8") as f:
            json.dump({"source-root": "src/"}, f)

    def tearDown(self):
        self._tmp.cleanup()

    def write_records(self, records):
        path = os.path.join(self.root, "records.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f)
        return path

    def test_builds_document_from_unsorted_records(self):
        records = self.write_records(
            [
                {"generated": {"line": 1, "column": 0}, "original": {"line": 1, "column": 0}},
                {"generated": {"line": 0, "column": 0}, "original": {"line": 0, "column": 0}},
            ]
        )
        out_path = os.path.join(self.root, "out.map")
        code, _, _ = run_cli(
            "sourcemap", records, "-o", out_path, "--file", "out.php",
            "--source", "in.phel", "--config", self.config,
        )
        self.assertEqual(code, 0)
        with open(out_path, encoding="utf-8") as f:
            doc = json.load(f)
        self.assertEqual(doc["mappings"], "AAAA;AACA")
        self.assertEqual(doc["sources"], ["in.phel"])
        self.assertEqual(doc["sourceRoot"], "src/")
        self.assertEqual(doc["file"], "out.php")

    def test_one_based_records(self):
        records = self.write_records(
            [{"generated": {"line": 1, "column": 2}, "original": {"line": 1, "column": 0}}]
        )
        code, out, _ = run_cli(
            "sourcemap", records, "--one-based", "--config", self.config
        )
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["mappings"], "EAAA")

    def test_include_sources(self):
        source = os.path.join(self.root, "in.phel")
        with open(source, "w", encoding="utf-8") as f:
            f.write("(let [a 1] a)")
        records = self.write_records([])
        code, out, _ = run_cli(
            "sourcemap", records, "--source", source, "--include-sources",
            "--config", self.config,
        )
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["sourcesContent"], ["(let [a 1] a)"])

    def test_bad_records(self):
        records = self.write_records({"generated": {}})
        code, _, err = run_cli("sourcemap", records, "--config", self.config)
        self.assertEqual(code, 1)
        self.assertIn("Error reading records", err)

    def test_missing_record_field(self):
        records = self.write_records([{"generated": {"line": 0}}])
        code, _, err = run_cli("sourcemap", records, "--config", self.config)
        self.assertEqual(code, 1)
        self.assertIn("Error reading records", err)


class TestNoCommand(unittest.TestCase):
    def test_prints_help(self):
        code, out, _ = run_cli()
        self.assertEqual(code, 1)
        self.assertIn("sprout", out)


if __name__ == "__main__":
    unittest.main()
