"""
/**
 * @file translator_backend/tests/test_file_service.py
 * @description 文件服务单元测试：zip 打包、临时文件、临时目录。
 */
"""

import os
import tempfile
import unittest
import uuid
import zipfile
from unittest.mock import patch

from translator_backend.exceptions import FileIoError
from translator_backend.services.file_service import create_temp_file, create_zip_file, get_temp_dir


class TestCreateZipFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name
        self.addCleanup(self._tmp.cleanup)

    def _write(self, name, data):
        path = os.path.join(self.tmp, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_two_entries_round_trip(self):
        a = self._write("a.bin", b"\x00\x01first")
        b = self._write("b.txt", "第二个".encode("utf-8"))
        zip_path = os.path.join(self.tmp, "out.zip")

        create_zip_file([(a, "Report.pdf"), (b, "Meeting_Minutes.docx")], zip_path)

        with zipfile.ZipFile(zip_path) as zf:
            self.assertEqual(zf.namelist(), ["Report.pdf", "Meeting_Minutes.docx"])
            self.assertEqual(zf.read("Report.pdf"), b"\x00\x01first")
            self.assertEqual(zf.read("Meeting_Minutes.docx"), "第二个".encode("utf-8"))
            for info in zf.infolist():
                self.assertEqual(info.compress_type, zipfile.ZIP_STORED)

    def test_missing_source_stops_and_leaves_partial_archive(self):
        a = self._write("a.txt", b"a")
        zip_path = os.path.join(self.tmp, "out.zip")
        missing = os.path.join(self.tmp, "missing.txt")

        with self.assertRaises(FileIoError) as ctx:
            create_zip_file([(a, "a.txt"), (missing, "missing.txt")], zip_path)
        self.assertEqual(ctx.exception.path, missing)

        with zipfile.ZipFile(zip_path) as zf:
            self.assertEqual(zf.namelist(), ["a.txt"])

    def test_unwritable_destination(self):
        a = self._write("a.txt", b"a")
        with self.assertRaises(FileIoError):
            create_zip_file([(a, "a.txt")], os.path.join(self.tmp, "no", "such", "dir", "out.zip"))


class TestTempFiles(unittest.TestCase):
    def test_get_temp_dir(self):
        self.assertEqual(get_temp_dir(), tempfile.gettempdir())

    def test_create_and_overwrite(self):
        name = f"translator-test-{uuid.uuid4().hex}.txt"
        path = create_temp_file(name, b"first")
        self.addCleanup(os.remove, path)
        self.assertTrue(os.path.isabs(path))
        self.assertEqual(os.path.dirname(path), os.path.abspath(tempfile.gettempdir()))

        self.assertEqual(create_temp_file(name, b"2nd"), path)
        with open(path, "rb") as f:
            self.assertEqual(f.read(), b"2nd")

    def test_unwritable_target(self):
        with tempfile.TemporaryDirectory() as tmp:
            temp_dir = os.path.join(tmp, "tmp")
            os.mkdir(temp_dir)
            os.mkdir(os.path.join(temp_dir, "taken"))
            with patch("translator_backend.services.file_service.get_temp_dir", return_value=temp_dir):
                # a directory already holds the name
                with self.assertRaises(FileIoError):
                    create_temp_file("taken", b"x")

    def test_names_cannot_leave_temp_dir(self):
        with tempfile.TemporaryDirectory() as outer:
            temp_dir = os.path.join(outer, "tmp")
            os.mkdir(temp_dir)
            names = [
                os.path.join("..", "escaped.txt"),
                "../escaped.txt",
                os.path.join("nested", "x.txt"),
                os.path.join(outer, "escaped.txt"),
                "",
                ".",
                "..",
            ]
            with patch("translator_backend.services.file_service.get_temp_dir", return_value=temp_dir):
                for name in names:
                    with self.assertRaises(FileIoError, msg=name):
                        create_temp_file(name, b"x")
            self.assertEqual(os.listdir(outer), ["tmp"])
            self.assertEqual(os.listdir(temp_dir), [])

    def test_symlink_out_of_temp_dir_is_rejected(self):
        with tempfile.TemporaryDirectory() as outer:
            temp_dir = os.path.join(outer, "tmp")
            os.mkdir(temp_dir)
            target = os.path.join(outer, "target.txt")
            os.symlink(target, os.path.join(temp_dir, "link.txt"))
            with patch("translator_backend.services.file_service.get_temp_dir", return_value=temp_dir):
                with self.assertRaises(FileIoError):
                    create_temp_file("link.txt", b"x")
            self.assertFalse(os.path.exists(target))


if __name__ == "__main__":
    unittest.main()
