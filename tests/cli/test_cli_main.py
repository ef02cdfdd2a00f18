# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import unittest
import unittest.mock
from contextlib import redirect_stdout
from io import BytesIO, StringIO, TextIOWrapper

from scriptctl.cli.main import main
from test_utils import ancestor_has_manifest, touch, workspace, write_manifest


def _run(cwd, *, color: bool = False) -> str:
    buffer = StringIO()
    with (
        unittest.mock.patch("scriptctl.cli.main._current_dir", return_value=cwd),
        unittest.mock.patch("scriptctl.cli.main._supports_color", return_value=color),
        redirect_stdout(buffer),
    ):
        main([])
    return buffer.getvalue()


class CliMainTests(unittest.TestCase):
    def test_lists_commands_of_nearest_manifest(self) -> None:
        with workspace() as root:
            write_manifest(root, {"name": "x", "scripts": {"build": "tsc", "test": "jest"}})
            touch(root / "package-lock.json")
            touch(root / "yarn.lock")
            start = root / "src" / "lib"
            start.mkdir(parents=True)

            output = _run(start)

        self.assertEqual(
            output.splitlines(),
            [str(root), "NPM lockfile found", "Available Commands", "build tsc", "test jest"],
        )

    def test_no_manifest(self) -> None:
        with workspace() as root:
            if ancestor_has_manifest(root):
                self.skipTest("package.json present above the temp directory")
            output = _run(root)
        self.assertEqual(output, "No package.json found\n")

    def test_no_scripts(self) -> None:
        with workspace() as root:
            write_manifest(root, {"name": "x"})
            output = _run(root)
        self.assertEqual(
            output.splitlines(), [str(root), "No package manager found", "No commands found"]
        )

    def test_invalid_manifest(self) -> None:
        for content in ('{"name": 123}', "{broken"):
            with self.subTest(content=content), workspace() as root:
                write_manifest(root, content)
                lines = _run(root).splitlines()
                self.assertEqual(lines[2], "package.json is not valid JSON")
                self.assertEqual(len(lines), 4)
                self.assertTrue(lines[3].strip())

    def test_colored_output(self) -> None:
        with workspace() as root:
            write_manifest(root, {"name": "x"})
            output = _run(root, color=True)
        self.assertIn("\x1b[1;34mNo package manager found\x1b[0m", output)
        self.assertIn("\x1b[1;31mNo commands found\x1b[0m", output)

    def test_missing_working_directory_is_fatal(self) -> None:
        with (
            unittest.mock.patch(
                "scriptctl.cli.main.get_version_info", return_value=("1.2.3", None)
            ),
            unittest.mock.patch(
                "scriptctl.cli.main.Path.cwd", side_effect=FileNotFoundError(2, "No such file")
            ),
        ):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertIn("Could not determine the current directory", str(ctx.exception.code))

    def test_unknown_argument_is_usage_error(self) -> None:
        with redirect_stdout(StringIO()), unittest.mock.patch("sys.stderr", StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--frobnicate"])
        self.assertEqual(ctx.exception.code, 2)

    def test_version(self) -> None:
        buffer = StringIO()
        with (
            unittest.mock.patch(
                "scriptctl.cli.main.get_version_info", return_value=("1.2.3", None)
            ),
            redirect_stdout(buffer),
        ):
            with self.assertRaises(SystemExit) as ctx:
                main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("scriptctl 1.2.3", buffer.getvalue())
        self.assertIn("License: Apache-2.0", buffer.getvalue())

    def test_decoder_failures_are_reported(self) -> None:
        for content in (
            '{"name":"x","deep":' + "[" * 100000 + "]" * 100000 + "}",
            '{"name":"x","version":' + "1" * 5000 + "}",
            '{"name":"x","weight":NaN}',
        ):
            with self.subTest(content=content[:30]), workspace() as root:
                write_manifest(root, content)
                lines = _run(root).splitlines()
                self.assertEqual(lines[2], "package.json is not valid JSON")
                self.assertEqual(len(lines), 4)
                self.assertTrue(lines[3].strip())

    def test_lone_surrogate_reported_on_utf8_stdout(self) -> None:
        with workspace() as root:
            write_manifest(root, r'{"name":"x","scripts":{"a":"\ud800"}}')
            raw = BytesIO()
            stream = TextIOWrapper(raw, encoding="utf-8")
            with (
                unittest.mock.patch("scriptctl.cli.main._current_dir", return_value=root),
                unittest.mock.patch("scriptctl.cli.main._supports_color", return_value=False),
                redirect_stdout(stream),
            ):
                main([])
            stream.flush()
            lines = raw.getvalue().decode("utf-8").splitlines()
        self.assertEqual(lines[2], "package.json is not valid JSON")
        self.assertIn("lone surrogate", lines[3])
