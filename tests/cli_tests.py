import csv
import os
import shutil
import subprocess
import sys
import unittest
from tempfile import TemporaryDirectory

ROOTDIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SCRIPT = os.path.join(ROOTDIR, "u2c.py")
DATADIR = os.path.join(ROOTDIR, "tests", "test_data")


def runscript(*args):
    return subprocess.run(
        [sys.executable, SCRIPT, *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=False,
    )


def readcsv(fname):
    with open(fname, "r", encoding="utf_8", newline="") as ifile:
        return list(csv.reader(ifile))


class TestCsvGeneration(unittest.TestCase):

    # run u2c.py on the test data directory
    # jhn.usx and jhn.usfm both write jhn.csv
    def test_csv_files_are_created(self):
        with TemporaryDirectory() as tmpdir:
            result = runscript("-o", tmpdir, DATADIR)
            self.assertEqual(result.returncode, 0)
            self.assertEqual(sorted(os.listdir(tmpdir)), ["jhn.csv"])

    def test_usx_and_usfm_tables_match(self):
        with TemporaryDirectory() as tmpdir:
            self.assertEqual(runscript("-o", os.path.join(tmpdir, "usx"), os.path.join(DATADIR, "jhn.usx")).returncode, 0)
            self.assertEqual(runscript("-o", os.path.join(tmpdir, "usfm"), os.path.join(DATADIR, "jhn.usfm")).returncode, 0)
            usxrows = readcsv(os.path.join(tmpdir, "usx", "jhn.csv"))
            usfmrows = readcsv(os.path.join(tmpdir, "usfm", "jhn.csv"))
        self.assertEqual(usxrows, usfmrows)
        self.assertEqual(
            usxrows[0],
            ["Book", "Chapter", "Verse", "TextPlain", "TextStyled", "Footnotes", "Crossrefs", "Subtitle"],
        )
        self.assertEqual(
            [row[1:3] for row in usxrows[1:]],
            [["1", "1"], ["1", "2"], ["1", "3"], ["1", "5"], ["2", "1"], ["2", "10"], ["2", "2"]],
        )

    def test_output_beside_source(self):
        with TemporaryDirectory() as tmpdir:
            shutil.copy(os.path.join(DATADIR, "jhn.usfm"), os.path.join(tmpdir, "JHN.SFM"))
            result = runscript(os.path.join(tmpdir, "JHN.SFM"))
            self.assertEqual(result.returncode, 0)
            rows = readcsv(os.path.join(tmpdir, "JHN.csv"))
        self.assertEqual(rows[1][:4], ["JHN", "1", "1", "Hello world."])

    def test_bad_file_is_skipped(self):
        with TemporaryDirectory() as tmpdir:
            indir = os.path.join(tmpdir, "in")
            outdir = os.path.join(tmpdir, "out")
            os.mkdir(indir)
            shutil.copy(os.path.join(DATADIR, "jhn.usx"), indir)
            with open(os.path.join(indir, "bad.usfm"), "w", encoding="utf_8") as ofile:
                ofile.write("\\c 1\n\\v 1 no book id\n")
            with open(os.path.join(indir, "notes.txt"), "w", encoding="utf_8") as ofile:
                ofile.write("ignored\n")
            result = runscript("-o", outdir, indir)
            self.assertEqual(result.returncode, 0)
            self.assertEqual(os.listdir(outdir), ["jhn.csv"])
            self.assertIn("bad.usfm", result.stderr.decode())

    def test_unsupported_extension(self):
        with TemporaryDirectory() as tmpdir:
            fname = os.path.join(tmpdir, "jhn.txt")
            shutil.copy(os.path.join(DATADIR, "jhn.usfm"), fname)
            result = runscript(fname)
            self.assertNotEqual(result.returncode, 0)
            self.assertFalse(os.path.exists(os.path.join(tmpdir, "jhn.csv")))

    def test_empty_directory(self):
        with TemporaryDirectory() as tmpdir:
            result = runscript(tmpdir)
        self.assertNotEqual(result.returncode, 0)

    def test_missing_input(self):
        with TemporaryDirectory() as tmpdir:
            result = runscript(os.path.join(tmpdir, "nothing.usx"))
        self.assertNotEqual(result.returncode, 0)


if __name__ == "__main__":
    unittest.main()
