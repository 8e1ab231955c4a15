"""
Tests for the command line interface.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from typer.testing import CliRunner

from covidtracker.cli import app
from covidtracker.errors import DataSourceError
from covidtracker.models import CountryStat, GlobalStat
from tests.fixtures import COUNTRIES_PAYLOAD, GLOBAL_PAYLOAD, HISTORY_PAYLOAD, country_payload


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.temp_dir = tempfile.mkdtemp()
        patcher = patch("covidtracker.cli.DiseaseClient")
        self.client_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.client = self.client_cls.from_config.return_value
        self.client.fetch_global.return_value = GlobalStat.from_json(GLOBAL_PAYLOAD)
        self.client.fetch_all_countries.return_value = [CountryStat.from_json(p) for p in COUNTRIES_PAYLOAD]
        self.client.fetch_country.return_value = CountryStat.from_json(country_payload("France", "FR", 1500))
        self.client.fetch_history.return_value = HISTORY_PAYLOAD

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_summary_worldwide(self):
        result = self.runner.invoke(app, ["summary"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Worldwide", result.output)
        self.assertIn("700.0m", result.output)
        self.assertIn("+1.2k today", result.output)

    def test_summary_country(self):
        result = self.runner.invoke(app, ["summary", "--country", "FR"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("France", result.output)
        self.client.fetch_country.assert_called_once_with("FR")

    def test_summary_failure_exits_nonzero(self):
        self.client.fetch_global.side_effect = DataSourceError("down")
        result = self.runner.invoke(app, ["summary"])
        self.assertEqual(result.exit_code, 1)

    def test_table_sorted(self):
        result = self.runner.invoke(app, ["table", "--top", "2"])
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("USA"))
        self.assertTrue(lines[1].startswith("Germany"))
        self.assertIn("1,500", lines[0])

    def test_table_csv(self):
        out = os.path.join(self.temp_dir, "table.csv")
        result = self.runner.invoke(app, ["table", "--output", out])
        self.assertEqual(result.exit_code, 0, result.output)
        with open(out) as f:
            self.assertEqual(f.readline().strip(), "country,cases")

    def test_map_html(self):
        out = os.path.join(self.temp_dir, "map.html")
        result = self.runner.invoke(app, ["map", out, "--kind", "deaths"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(os.path.exists(out))

    def test_map_choropleth(self):
        out = os.path.join(self.temp_dir, "choropleth.html")
        result = self.runner.invoke(app, ["map", out, "--style", "choropleth"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(os.path.exists(out))

    def test_map_bad_kind(self):
        out = os.path.join(self.temp_dir, "map.html")
        result = self.runner.invoke(app, ["map", out, "--kind", "tests"])
        self.assertNotEqual(result.exit_code, 0)

    def test_trend_html(self):
        out = os.path.join(self.temp_dir, "trend.html")
        result = self.runner.invoke(app, ["trend", out, "--days", "30"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.client.fetch_history.assert_called_once_with(30)
        self.assertTrue(os.path.exists(out))


if __name__ == '__main__':
    unittest.main()
