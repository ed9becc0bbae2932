"""Sweep runner, statistics, configuration, CSV export and charts."""

import contextlib
import csv
import io
import json
import os
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager
from nqueens_counter.analysis import settings
from nqueens_counter.analysis import cli
from nqueens_counter.analysis.experiments import run_sweep, validate_entry
from nqueens_counter.analysis.reporting import save_raw_times_to_csv, save_sweep_to_csv
from nqueens_counter.analysis.stats import (
    ProgressPrinter,
    compute_detailed_statistics,
    estimate_growth_rate,
)


def quiet(func, *args, **kwargs):
    with contextlib.redirect_stdout(io.StringIO()):
        return func(*args, **kwargs)


class StatsTests(unittest.TestCase):
    def test_empty_statistics(self):
        summary = compute_detailed_statistics([])
        self.assertEqual(summary["count"], 0)
        self.assertIsNone(summary["mean"])

    def test_statistics(self):
        summary = compute_detailed_statistics([1.0, 2.0, 3.0, 4.0])
        self.assertEqual(summary["count"], 4)
        self.assertAlmostEqual(summary["mean"], 2.5)
        self.assertAlmostEqual(summary["median"], 2.5)
        self.assertEqual(summary["min"], 1.0)
        self.assertEqual(summary["max"], 4.0)
        self.assertEqual(summary["range"], 3.0)

    def test_growth_rate_of_exact_exponential(self):
        rate = estimate_growth_rate([1, 2, 3, 4], [3, 9, 27, 81])
        self.assertAlmostEqual(rate, 3.0, places=6)

    def test_growth_rate_needs_two_points(self):
        self.assertIsNone(estimate_growth_rate([4], [38]))
        self.assertIsNone(estimate_growth_rate([], []))

    def test_progress_printer(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            ProgressPrinter(4, "Sweep").update(2, "N=5")
        self.assertEqual(out.getvalue(), "[Sweep] 2/4 (50%) - N=5\n")


class SweepTests(unittest.TestCase):
    def test_sweep_counts(self):
        results = quiet(run_sweep, [1, 4, 6], runs=2, validate=True)
        self.assertEqual(sorted(results), [1, 4, 6])
        self.assertEqual(results[4]["placements"], 38)
        self.assertEqual(results[4]["solutions"], 2)
        self.assertEqual(results[4]["placements_per_solution"], 19.0)
        self.assertEqual(results[6]["solutions"], 4)
        self.assertEqual(len(results[1]["raw_times"]), 2)
        self.assertEqual(results[1]["time"]["count"], 2)

    def test_unsolvable_size_has_no_ratio(self):
        results = quiet(run_sweep, [3], runs=1)
        self.assertIsNone(results[3]["placements_per_solution"])

    def test_validation_detects_wrong_reference(self):
        with self.assertRaises(AssertionError):
            quiet(run_sweep, [5], runs=1, validate=True, reference={5: 11})

    def test_validation_detects_impossible_placements(self):
        entry = {"placements": 3, "solutions": 2, "placements_per_solution": 1.5, "time": {}, "raw_times": []}
        with self.assertRaises(AssertionError):
            validate_entry(4, entry, reference={})


class ReportingTests(unittest.TestCase):
    def setUp(self):
        self.results = quiet(run_sweep, [4, 5, 6], runs=2)

    def test_sweep_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = quiet(save_sweep_to_csv, self.results, [4, 5, 6], tmpdir)
            with open(path, newline="") as f:
                rows = list(csv.reader(f))
        self.assertEqual(rows[0][:3], ["n", "placements", "solutions"])
        self.assertEqual(rows[1][:3], ["4", "38", "2"])
        self.assertEqual([r[0] for r in rows[1:4]], ["4", "5", "6"])
        self.assertEqual(rows[-1][0], "growth")
        self.assertGreater(float(rows[-1][1]), 1.0)

    def test_raw_times_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = quiet(save_raw_times_to_csv, self.results, [4, 5, 6], tmpdir)
            with open(path, newline="") as f:
                rows = list(csv.reader(f))
        self.assertEqual(rows[0], ["n", "run", "placements", "solutions", "time_seconds"])
        self.assertEqual(len(rows), 1 + 3 * 2)

    def test_plots_written(self):
        from nqueens_counter.analysis.plots import plot_sweep, sweep_to_dataframe

        df = sweep_to_dataframe(self.results, [4, 5, 6])
        self.assertEqual(df["solutions"].tolist(), [2, 10, 4])
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = quiet(plot_sweep, self.results, [4, 5, 6], tmpdir)
            self.assertGreaterEqual(len(paths), 2)
            for path in paths:
                self.assertTrue(os.path.exists(path))
                self.assertGreater(os.path.getsize(path), 0)


class ConfigTests(unittest.TestCase):
    def setUp(self):
        self._saved = {
            name: getattr(settings, name)
            for name in ("N_VALUES", "RUNS_PER_SIZE", "OUT_DIR", "RUN_TAG", "DATE_IN_FILENAMES", "REFERENCE_SOLUTIONS")
        }
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmpdir.name, "config.json")
        with open(self.config_path, "w") as f:
            json.dump(
                {
                    "experiment_settings": {
                        "N_values": [4, 5],
                        "runs_per_size": 1,
                        "output_dir": os.path.join(self.tmpdir.name, "out"),
                    },
                    "reference_counts": {"4": 2, "5": 10},
                },
                f,
            )

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self.tmpdir.cleanup()

    def test_missing_config(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(os.path.join(self.tmpdir.name, "missing.json"))

    def test_reference_counts_use_int_keys(self):
        mgr = ConfigManager(self.config_path)
        self.assertEqual(mgr.get_reference_counts(), {4: 2, 5: 10})

    def test_update_setting_persists(self):
        mgr = ConfigManager(self.config_path)
        mgr.update_setting("experiment_settings", "runs_per_size", 7)
        self.assertEqual(ConfigManager(self.config_path).get_experiment_settings()["runs_per_size"], 7)

    def test_apply_configuration(self):
        cli.apply_configuration(self.config_path)
        self.assertEqual(settings.N_VALUES, [4, 5])
        self.assertEqual(settings.RUNS_PER_SIZE, 1)
        self.assertEqual(settings.REFERENCE_SOLUTIONS, {4: 2, 5: 10})

    def test_parse_size_filters(self):
        self.assertIsNone(cli.parse_size_filters(None))
        self.assertEqual(cli.parse_size_filters(["4-6", "8,4"]), [4, 5, 6, 8])
        with self.assertRaises(ValueError):
            cli.parse_size_filters(["four"])
        with self.assertRaises(ValueError):
            cli.parse_size_filters(["8-4"])

    def test_main_runs_pipeline(self):
        quiet(cli.main, ["--config", self.config_path, "--no-plots", "--validate"])
        out_dir = os.path.join(self.tmpdir.name, "out")
        self.assertTrue(os.path.exists(os.path.join(out_dir, "sweep_counts.csv")))
        self.assertTrue(os.path.exists(os.path.join(out_dir, "sweep_raw_times.csv")))

    def test_main_invalid_size_exits(self):
        with self.assertRaises(SystemExit) as ctx:
            quiet(cli.main, ["--config", self.config_path, "--no-plots", "-n", "0"])
        self.assertEqual(ctx.exception.code, 1)

    def test_main_unallocatable_size_exits(self):
        with self.assertRaises(SystemExit) as ctx:
            quiet(cli.main, ["--config", self.config_path, "--no-plots", "-n", str(2 ** 64)])
        self.assertEqual(ctx.exception.code, 1)

    def test_main_missing_config_exits(self):
        with self.assertRaises(SystemExit) as ctx:
            quiet(cli.main, ["--config", os.path.join(self.tmpdir.name, "nope.json")])
        self.assertEqual(ctx.exception.code, 1)


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def test_quick_regression(self):
        quiet(cli.run_quick_regression_tests)


if __name__ == "__main__":
    unittest.main()
