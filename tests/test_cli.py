import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch
from file_organizer import __version__
from file_organizer.__main__ import confirm, main
from file_organizer.errors import ConfirmationError

class TestConfirm(unittest.TestCase):
    def test_only_y_proceeds(self):
        for answer, expected in [
            ("y", True), ("Y", True), (" y ", True),
            ("n", False), ("", False), ("yes", False), ("yy", False), ("no", False),
        ]:
            with patch("builtins.input", return_value=answer):
                self.assertEqual(confirm(), expected, repr(answer))

    def test_unreadable_input_is_an_error(self):
        with patch("builtins.input", side_effect=EOFError):
            with self.assertRaises(ConfirmationError) as ctx:
                confirm()
        self.assertIn("EOFError", str(ctx.exception))


class TestMain(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        for name in ("a.jpg", "b.txt", "c.xyz", "d"):
            (self.test_dir / name).write_text(name)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _run(self, argv, answer=None, input_error=None):
        out = io.StringIO()
        err = io.StringIO()
        side_effect = input_error if input_error else [answer]
        with patch("builtins.input", side_effect=side_effect), \
             redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue()

    def _names(self):
        return sorted(p.name for p in self.test_dir.iterdir())

    def test_confirmed_run(self):
        code, output = self._run([str(self.test_dir)], answer="y")

        self.assertEqual(code, 0)
        self.assertEqual(self._names(), ["d", "documents", "images", "others"])
        self.assertTrue((self.test_dir / "images" / "a.jpg").exists())
        self.assertIn("Files moved", output)
        self.assertIn("Directories created", output)

    def test_declined_run_changes_nothing(self):
        with patch("file_organizer.__main__.organize_directory") as mock_organize:
            code, output = self._run([str(self.test_dir)], answer="n")

        self.assertEqual(code, 0)
        mock_organize.assert_not_called()
        self.assertEqual(self._names(), ["a.jpg", "b.txt", "c.xyz", "d"])
        self.assertIn("cancelled", output)

    def test_empty_answer_declines(self):
        code, _ = self._run([str(self.test_dir)], answer="")

        self.assertEqual(code, 0)
        self.assertEqual(self._names(), ["a.jpg", "b.txt", "c.xyz", "d"])

    def test_input_failure_exits_nonzero(self):
        code, output = self._run([str(self.test_dir)], input_error=EOFError)

        self.assertEqual(code, 1)
        self.assertIn("ERROR", output)
        self.assertEqual(self._names(), ["a.jpg", "b.txt", "c.xyz", "d"])

    def test_missing_directory_exits_nonzero(self):
        missing = self.test_dir / "missing"
        code, output = self._run([str(missing)], answer="y")

        self.assertEqual(code, 1)
        self.assertIn("missing", output)

    def test_move_failure_exits_nonzero(self):
        with patch("file_organizer.executor.os.rename", side_effect=PermissionError(13, "Permission denied")):
            code, output = self._run([str(self.test_dir)], answer="y")

        self.assertEqual(code, 1)
        self.assertIn("Permission denied", output)
        self.assertTrue((self.test_dir / "a.jpg").exists())

    def test_keyboard_interrupt(self):
        code, output = self._run([str(self.test_dir)], input_error=KeyboardInterrupt)

        self.assertEqual(code, 130)
        self.assertIn("[ABORT]", output)

    def test_version(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, out.getvalue())

if __name__ == '__main__':
    unittest.main()
