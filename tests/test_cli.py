"""Test cli.py"""

import io
import json
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from json_tabulator import cli


class CliTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def run_cli(self, argv, stdin=b''):
        out, err = io.StringIO(), io.StringIO()
        fake_stdin = io.TextIOWrapper(io.BytesIO(stdin), encoding='utf-8')
        with mock.patch('sys.stdin', fake_stdin), redirect_stdout(out), redirect_stderr(err):
            code = cli.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_concrete_scenario(self):
        path = self.write("in.json", '[{"a":1,"b":{"c":true}}, {"a":2}]')
        code, out, _ = self.run_cli(["-separator", ",", path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "a,b.c\n1,true\n2,\n")

    def test_skip(self):
        path = self.write("in.json", '{"_data":[{"x":"y"}]}')
        code, out, _ = self.run_cli(["-skip", "_data", path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "_data.x\ny\n")

    def test_skip_without_prefix(self):
        path = self.write("in.json", '{"_data":[{"x":"y"}]}')
        code, out, _ = self.run_cli(["--skip", "_data", "--no-prefix", path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "x\ny\n")

    def test_repeated_skip_and_skip_path(self):
        path = self.write("in.json", '{"a":{"b.c":[[{"n":1}],[{"n":2}]]}}')
        code, out, _ = self.run_cli(["-skip", "a", "-skip-path", "b\\.c.1", path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "a.b.c.1.n\n2\n")

    def test_stdin_by_default(self):
        code, out, _ = self.run_cli([], stdin=b'[{"k":"v"}]')
        self.assertEqual(code, 0)
        self.assertEqual(out, "k\nv\n")

    def test_dash_means_stdin(self):
        code, out, _ = self.run_cli(["-"], stdin=b'[{"k":"v"}]')
        self.assertEqual(code, 0)
        self.assertEqual(out, "k\nv\n")

    def test_multiple_inputs_in_order(self):
        first = self.write("1.json", json.dumps([{"n": 1}]))
        second = self.write("2.json", json.dumps([{"n": 2, "extra": True}]))
        code, out, _ = self.run_cli(["-separator", ",", first, second])
        self.assertEqual(code, 0)
        self.assertEqual(out, "extra,n\n,1\ntrue,2\n")

    def test_help(self):
        code, out, err = self.run_cli(["-help"])
        self.assertEqual(code, cli.EXIT_USAGE)
        self.assertEqual(out, "")
        self.assertIn("inputs must be valid JSON files with a top-level array.", err)

    def test_invalid_separator(self):
        path = self.write("in.json", '[]')
        with self.assertLogs('json_tabulator.cli', level='ERROR') as logs:
            code, out, _ = self.run_cli(["-separator", "ab", path])
        self.assertEqual(code, cli.EXIT_USAGE)
        self.assertEqual(out, "")
        self.assertIn("invalid separator", logs.output[0])

    def test_invalid_separator_checked_before_inputs(self):
        missing = os.path.join(self.tmpdir, "missing.json")
        with self.assertLogs('json_tabulator.cli', level='ERROR'):
            code, _, _ = self.run_cli(["-separator", "", missing])
        self.assertEqual(code, cli.EXIT_USAGE)

    def test_failure_writes_no_output(self):
        good = self.write("good.json", '[{"a":1}]')
        bad = self.write("bad.json", '{"a":1}')
        with self.assertLogs('json_tabulator.cli', level='ERROR') as logs:
            code, out, _ = self.run_cli([good, bad])
        self.assertEqual(code, cli.EXIT_FAILURE)
        self.assertEqual(out, "")
        self.assertIn("object", logs.output[0])

    def test_bad_json(self):
        bad = self.write("bad.json", '[1,')
        with self.assertLogs('json_tabulator.cli', level='ERROR') as logs:
            code, out, _ = self.run_cli([bad])
        self.assertEqual(code, cli.EXIT_FAILURE)
        self.assertEqual(out, "")
        self.assertIn("bad.json", logs.output[0])

    def test_deeply_nested_input(self):
        deep = self.write("deep.json", "[" * 100000 + "1" + "]" * 100000)
        with self.assertLogs('json_tabulator.cli', level='ERROR') as logs:
            code, out, _ = self.run_cli([deep])
        self.assertEqual(code, cli.EXIT_FAILURE)
        self.assertEqual(out, "")
        self.assertIn("nested too deeply", logs.output[0])

    def test_number_out_of_range(self):
        path = self.write("big.json", '[{"n": 1e400}]')
        with self.assertLogs('json_tabulator.cli', level='ERROR') as logs:
            code, out, _ = self.run_cli([path])
        self.assertEqual(code, cli.EXIT_FAILURE)
        self.assertEqual(out, "")
        self.assertIn("out of range", logs.output[0])

    def test_missing_file(self):
        with self.assertLogs('json_tabulator.cli', level='ERROR'):
            code, out, _ = self.run_cli([os.path.join(self.tmpdir, "missing.json")])
        self.assertEqual(code, cli.EXIT_FAILURE)
        self.assertEqual(out, "")

    def test_bad_skip_step(self):
        path = self.write("in.json", '[[1], [2]]')
        with self.assertLogs('json_tabulator.cli', level='ERROR') as logs:
            code, _, _ = self.run_cli(["-skip", "first", path])
        self.assertEqual(code, cli.EXIT_FAILURE)
        self.assertIn("first", logs.output[0])

    def test_input_sources(self):
        self.assertEqual(cli.input_sources([]), ["-"])
        self.assertEqual(cli.input_sources(["a.json", "-"]), ["a.json", "-"])


if __name__ == '__main__':
    unittest.main()
