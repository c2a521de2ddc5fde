#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the SubCalc interactive input loop.
"""
import io
import os
import subprocess
import sys
import unittest

from subcalc import cli
from subcalc import core


class TestInteractiveLoop(unittest.TestCase):
    """Test cases for cli.run_interactive."""

    def run_loop(self, text):
        stdin = io.StringIO(text)
        stdout = io.StringIO()
        code = cli.run_interactive(stdin=stdin, stdout=stdout)
        return code, stdout.getvalue()

    def setUp(self):
        core.setup_logging(debug=False)

    def test_banner_and_prompt(self):
        code, output = self.run_loop("ex\n")
        self.assertEqual(code, 0)
        self.assertTrue(output.startswith("SubCalc "))
        self.assertIn("Write 'ex' to exit the program.", output)
        self.assertIn(cli.PROMPT, output)

    def test_valid_input_prints_result(self):
        code, output = self.run_loop("192.168.1.10/24\nex\n")
        self.assertEqual(code, 0)
        self.assertIn("Network: 192.168.1.0", output)
        self.assertIn("Broadcast: 192.168.1.255", output)
        self.assertIn("Hosts: 254", output)
        self.assertIn("Next: 192.168.2.0/24", output)
        self.assertIn("Private: yes", output)

    def test_space_separated_input(self):
        _, output = self.run_loop("10.1.2.3 255.255.0.0\nex\n")
        self.assertIn("Network: 10.1.0.0", output)
        self.assertIn("Prefix: /16", output)

    def test_invalid_input_continues(self):
        _, output = self.run_loop("300.1.1.1/24\n8.8.8.8/32\nex\n")
        self.assertIn("Invalid Input! Invalid address '300.1.1.1'", output)
        self.assertIn("Network: 8.8.8.8", output)
        self.assertIn("Hosts: -1", output)

    def test_exit_keyword_stops_reading(self):
        _, output = self.run_loop("EXIT\n192.168.5.0/24\n")
        self.assertNotIn("192.168.5.0", output)

        for keyword in cli.EXIT_KEYWORDS:
            _, output = self.run_loop(f"  {keyword}  \n192.168.5.0/24\n")
            self.assertNotIn("192.168.5.0", output)

    def test_end_of_input_stops_loop(self):
        code, output = self.run_loop("172.16.0.1/12")
        self.assertEqual(code, 0)
        self.assertIn("Network: 172.16.0.0", output)

    def test_blank_lines_are_skipped(self):
        _, output = self.run_loop("\n   \nex\n")
        self.assertNotIn("Invalid Input!", output)

    def test_interactive_flag_via_subprocess(self):
        result = subprocess.run(
            [sys.executable, "-m", "subcalc", "--interactive"],
            input="192.168.1.10/24\nex\n",
            capture_output=True,
            text=True,
            cwd=os.path.dirname(os.path.abspath(__file__))
        )
        self.assertEqual(result.returncode, 0)
        self.assertIn("Network: 192.168.1.0", result.stdout)


class TestDebugMode(unittest.TestCase):
    """Test cases for debug configuration."""

    def tearDown(self):
        core.setup_logging(debug=False)

    def test_setup_logging_toggles_debug_mode(self):
        core.setup_logging(debug=True)
        self.assertTrue(core.DEBUG_MODE)
        core.setup_logging(debug=False)
        self.assertFalse(core.DEBUG_MODE)

    def test_debug_results_unchanged(self):
        plain = core.compute_from_cidr("192.168.1.10/24")
        core.setup_logging(debug=True)
        self.assertEqual(core.compute_from_cidr("192.168.1.10/24"), plain)

    def test_debug_env_var(self):
        env = dict(os.environ, **{cli.DEBUG_ENV_VAR: "true"})
        result = subprocess.run(
            [sys.executable, "-m", "subcalc", "10.0.0.1/8"],
            capture_output=True,
            text=True,
            env=env,
            cwd=os.path.dirname(os.path.abspath(__file__))
        )
        self.assertEqual(result.returncode, 0)
        self.assertIn("Network: 10.0.0.0", result.stdout)
        self.assertIn("[DEBUG]", result.stderr)
        self.assertIn("Entering compute_from_cidr", result.stderr)


if __name__ == '__main__':
    unittest.main()
