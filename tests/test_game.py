from __future__ import annotations

import io
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import pygame

from pixsnake.__main__ import build_parser, main
from pixsnake.game import millis_until, run
from pixsnake.interval import NS_PER_SECOND


def _scripted_events(*batches):
    pending = list(batches)

    def get(*args, **kwargs):
        return pending.pop(0) if pending else []

    return get


class TestCli(unittest.TestCase):
    def test_defaults(self):
        ns = build_parser().parse_args([])
        self.assertIsNone(ns.seed)
        self.assertEqual(ns.fps, 10)
        self.assertEqual(ns.field_size, 20)
        self.assertIsNone(ns.cell_size)

    def test_rejects_bad_values(self):
        for argv in (["--fps", "0"], ["--seed", "-1"], ["--field-size", "x"]):
            with self.assertRaises(SystemExit) as ctx, redirect_stderr(io.StringIO()):
                build_parser().parse_args(argv)
            self.assertEqual(ctx.exception.code, 2)

    def test_main_forwards_options(self):
        with mock.patch("pixsnake.__main__.run", return_value=0) as run_mock:
            code = main(["--seed", "42", "--fps", "5", "--field-size", "10", "--cell-size", "8"])
        self.assertEqual(code, 0)
        run_mock.assert_called_once_with(seed=42, fps=5, field_size=10, cell_size=8)


class TestWaiting(unittest.TestCase):
    def test_sub_millisecond_wait_rounds_up(self):
        self.assertEqual(millis_until(1_000_400, 1_000_000), 1)

    def test_partial_millisecond_rounds_up(self):
        self.assertEqual(millis_until(2_500_000, 0), 3)

    def test_whole_milliseconds_are_exact(self):
        self.assertEqual(millis_until(NS_PER_SECOND // 10, 0), 100)

    def test_past_wake_time_is_zero(self):
        self.assertEqual(millis_until(5, 10), 0)
        self.assertEqual(millis_until(10, 10), 0)


@mock.patch.dict(os.environ, {"SDL_VIDEODRIVER": "dummy"})
class TestRun(unittest.TestCase):
    def test_quit_event_exits_cleanly(self):
        events = _scripted_events([pygame.event.Event(pygame.QUIT)])
        with mock.patch("pygame.event.get", side_effect=events):
            self.assertEqual(run(seed=1, fps=200, field_size=4, cell_size=2), 0)

    def test_game_over_reports_score(self):
        events = _scripted_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)])
        out = io.StringIO()
        with mock.patch("pygame.event.get", side_effect=events), redirect_stdout(out):
            self.assertEqual(run(seed=1, fps=200, field_size=4, cell_size=2), 0)
        self.assertIn("Game Over! Score:", out.getvalue())


if __name__ == "__main__":
    unittest.main()
