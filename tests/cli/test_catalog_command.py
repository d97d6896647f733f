"""Tests for the catalog CLI command."""

import json
import unittest

from click.testing import CliRunner

from orrery.cli import cli


class TestCatalogCommand(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_text(self):
        result = self.runner.invoke(cli, ["catalog"], env={"ORRERY_CATALOG": None})
        self.assertEqual(result.exit_code, 0, result.output)
        lines = [line for line in result.output.splitlines() if line]
        self.assertEqual(len(lines), 8)
        self.assertTrue(lines[0].startswith("Mercury"))
        self.assertIn("1.00 AU", lines[2])

    def test_json(self):
        result = self.runner.invoke(
            cli, ["catalog", "--format", "json"], env={"ORRERY_CATALOG": None}
        )
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual([row["name"] for row in data][:3], ["Mercury", "Venus", "Earth"])
        self.assertEqual(data[2]["period"], 365.256)
        self.assertEqual(data[2]["mean_longitude"], 100.0)


if __name__ == "__main__":
    unittest.main()
