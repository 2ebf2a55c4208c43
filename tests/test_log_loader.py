import pathlib
import sys
import tempfile
import unittest

import numpy as np

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from samplelog.dataio.csv_writer import write_channels  # noqa: E402
from samplelog.dataio.log_loader import read_channels  # noqa: E402
from samplelog.errors import TableParseError  # noqa: E402


class ReadChannelsTest(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.tmp = pathlib.Path(self._tmpdir.name)

    def _write(self, name, text):
        path = self.tmp / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_columns_follow_header(self):
        path = self._write("abc.csv", "a,b,c\n1,2,3\n4,5,6\n")

        data = read_channels(path)

        self.assertEqual(list(data), ["a", "b", "c"])
        np.testing.assert_array_equal(data["a"], [1, 4])
        np.testing.assert_array_equal(data["b"], [2, 5])
        np.testing.assert_array_equal(data["c"], [3, 6])
        self.assertEqual(data["a"].dtype, np.float32)

    def test_header_only_gives_empty_columns(self):
        path = self._write("header.csv", "sample,gain\n")

        data = read_channels(path)

        self.assertEqual(list(data), ["sample", "gain"])
        self.assertEqual(data["sample"].size, 0)

    def test_round_trip_without_blanks(self):
        path = self.tmp / "round.csv"
        channels = {
            "sample": [0.1, -0.25, 3.0e-7],
            "envelope": [1.0, 0.5, 1e10],
            "weird, name": [float("inf"), 2.0, -0.0],
        }

        write_channels(path, channels)
        data = read_channels(path)

        self.assertEqual(list(data), list(channels))
        for name, values in channels.items():
            np.testing.assert_array_equal(data[name], np.asarray(values, dtype=np.float32))

    def test_trailing_blanks_shorten_columns(self):
        path = self._write("skew.csv", "sample,other\n0.1,1.0\n0.2,\n")

        data = read_channels(path)

        np.testing.assert_allclose(data["sample"], [0.1, 0.2])
        np.testing.assert_allclose(data["other"], [1.0])

    def test_strict_mode_rejects_trailing_blanks(self):
        path = self._write("skew.csv", "sample,other\n0.1,1.0\n0.2,\n")

        with self.assertRaises(TableParseError) as ctx:
            read_channels(path, allow_trailing_blanks=False)

        self.assertEqual(ctx.exception.line, 3)

    def test_blank_before_last_row_is_rejected(self):
        path = self._write("gap.csv", "a,b\n1,\n2,3\n")

        with self.assertRaises(TableParseError) as ctx:
            read_channels(path)

        self.assertEqual(ctx.exception.line, 2)

    def test_non_numeric_field_fails_whole_read(self):
        path = self._write("bad.csv", "a,b\n1,2\n3,oops\n")

        with self.assertRaises(TableParseError) as ctx:
            read_channels(path)

        self.assertIn("oops", str(ctx.exception))
        self.assertEqual(ctx.exception.line, 3)
        # Also usable where callers expect ValueError.
        self.assertIsInstance(ctx.exception, ValueError)

    def test_numbers_the_writer_never_emits_are_rejected(self):
        for field in ("1_000", " 1.5", "1.5 ", "infinity", "Infinity", "0x10", "+1"):
            with self.subTest(field=field):
                path = self._write("odd.csv", f"a,b\n1,{field}\n")
                with self.assertRaises(TableParseError):
                    read_channels(path)

    def test_writer_spellings_are_accepted(self):
        path = self._write(
            "spellings.csv", "a\n1\n-2.5\n.5\n1e+10\n1.5e-07\ninf\n-inf\nnan\n"
        )

        data = read_channels(path)

        np.testing.assert_array_equal(
            data["a"],
            np.asarray([1, -2.5, 0.5, 1e10, 1.5e-7, np.inf, -np.inf, np.nan], dtype=np.float32),
        )

    def test_empty_file_has_no_header(self):
        path = self._write("empty.csv", "")

        with self.assertRaises(TableParseError):
            read_channels(path)

    def test_malformed_headers_are_rejected(self):
        for text in ("a,,c\n1,2,3\n", "a,a\n1,2\n", "\n"):
            with self.subTest(text=text):
                path = self._write("header.csv", text)
                with self.assertRaises(TableParseError):
                    read_channels(path)

    def test_ragged_row_is_rejected(self):
        path = self._write("ragged.csv", "a,b\n1,2\n3\n")

        with self.assertRaises(TableParseError):
            read_channels(path)

    def test_invalid_utf8_is_a_parse_error(self):
        path = self.tmp / "latin1.csv"
        path.write_bytes(b"a\n\xff\n")

        with self.assertRaises(TableParseError):
            read_channels(path)

    def test_missing_file_raises_os_error(self):
        with self.assertRaises(FileNotFoundError):
            read_channels(self.tmp / "missing.csv")


if __name__ == "__main__":
    unittest.main()
