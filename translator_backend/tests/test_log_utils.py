"""
/**
 * @file translator_backend/tests/test_log_utils.py
 * @description 诊断日志单元测试：行格式、追加写入、密钥掩码。
 */
"""

import logging
import os
import re
import tempfile
import threading
import unittest
from unittest.mock import patch

from translator_backend.main import log_startup_state
from translator_backend.utils.log_utils import DIAGNOSTIC_LOGGER_NAME, get_diagnostic_logger, mask_secret


LINE_RE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (.*)$")


class TestDiagnosticLog(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = os.path.join(self._tmp.name, "translator_app.log")
        self.addCleanup(self._detach)

    def _detach(self):
        logger = logging.getLogger(DIAGNOSTIC_LOGGER_NAME)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(self.path):
                handler.close()
                logger.removeHandler(handler)

    def _lines(self):
        for handler in logging.getLogger(DIAGNOSTIC_LOGGER_NAME).handlers:
            handler.flush()
        with open(self.path, encoding="utf-8") as f:
            return f.read().splitlines()

    def test_lines_are_timestamped_and_appended(self):
        logger = get_diagnostic_logger(self.path)
        logger.info("first")
        logger.info("第二条")

        lines = self._lines()
        self.assertEqual([LINE_RE.match(line).group(1) for line in lines], ["first", "第二条"])

    def test_concurrent_appends_keep_lines_whole(self):
        logger = get_diagnostic_logger(self.path)
        threads_count, per_thread = 8, 50
        start = threading.Barrier(threads_count)

        def worker(n):
            start.wait()
            for i in range(per_thread):
                logger.info(f"worker {n} message {i} " + "x" * 200)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = self._lines()
        self.assertEqual(len(lines), threads_count * per_thread)
        messages = set()
        for line in lines:
            match = LINE_RE.match(line)
            self.assertIsNotNone(match, line)
            messages.add(match.group(1))
        expected = {
            f"worker {n} message {i} " + "x" * 200 for n in range(threads_count) for i in range(per_thread)
        }
        self.assertEqual(messages, expected)

    def test_handler_attached_once(self):
        get_diagnostic_logger(self.path)
        get_diagnostic_logger(self.path)
        matching = [
            h
            for h in logging.getLogger(DIAGNOSTIC_LOGGER_NAME).handlers
            if isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(self.path)
        ]
        self.assertEqual(len(matching), 1)

    @patch("translator_backend.main.load_dotenv", return_value=False)
    def test_startup_masks_key(self, _):
        get_diagnostic_logger(self.path)
        with patch.dict(os.environ, {"QWEN_API_KEY": "sk-abcdef123456"}, clear=True):
            log_startup_state()

        text = "\n".join(self._lines())
        self.assertIn("QWEN_API_KEY found: sk-a...", text)
        self.assertNotIn("sk-abcdef123456", text)
        self.assertIn("Application starting...", text)


class TestMaskSecret(unittest.TestCase):
    def test_mask(self):
        self.assertEqual(mask_secret("sk-1234567"), "sk-1...")
        self.assertEqual(mask_secret("abcd"), "***")
        self.assertEqual(mask_secret(""), "<missing>")
        self.assertEqual(mask_secret(None), "<missing>")


if __name__ == "__main__":
    unittest.main()
