import json
import logging
import logging.handlers
import os
import re
import sys
import threading
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from factom_wallet.crypto.base58check import ALPHABET, ENCODED_LENGTH

# Fs... and Es... strings; the first two characters of each are fixed by the prefix
SECRET_ADDRESS_PATTERN = re.compile(
    r'\b(?:Fs|Es)[%s]{%d}\b' % (re.escape(ALPHABET), ENCODED_LENGTH - 2)
)

class LogFormat(Enum):
    """Log format types"""
    TEXT = "text"
    JSON = "json"

class StructuredFormatter(logging.Formatter):
    """Structured log formatter"""

    def __init__(self, fmt_type: LogFormat = LogFormat.TEXT, include_context: bool = True):
        self.fmt_type = fmt_type
        self.include_context = include_context
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        structured_data = getattr(record, 'structured_data', {})
        if self.fmt_type == LogFormat.JSON:
            return self._format_json(record, structured_data)
        return self._format_text(record, structured_data)

    def _format_json(self, record: logging.LogRecord, structured_data: Dict) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName or f"Thread-{record.thread}",
        }

        exception = self._exception_text(record)
        if exception:
            log_entry["exception"] = exception

        if structured_data:
            log_entry["data"] = structured_data

        return json.dumps(log_entry, default=str)

    def _format_text(self, record: logging.LogRecord, structured_data: Dict) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

        base_msg = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        if self.include_context and structured_data:
            base_msg += f" | {json.dumps(structured_data, default=str)}"

        exception = self._exception_text(record)
        if exception:
            base_msg += f"\n{exception}"

        return base_msg

    def _exception_text(self, record: logging.LogRecord) -> Optional[str]:
        if record.exc_info:
            return self.formatException(record.exc_info)
        return record.exc_text

class SensitiveDataFilter(logging.Filter):
    """Filter masking secret addresses and registered secrets in logs"""

    def __init__(self):
        super().__init__()
        self.sensitive_patterns = set()
        self.masking_enabled = True
        self._traceback_formatter = logging.Formatter()

    def add_sensitive_pattern(self, pattern: str):
        if pattern and len(pattern) > 4:
            self.sensitive_patterns.add(pattern)

    def remove_sensitive_pattern(self, pattern: str):
        self.sensitive_patterns.discard(pattern)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.masking_enabled:
            return True

        if isinstance(record.msg, str):
            record.msg = self._mask_data(record.msg)

        if hasattr(record, 'structured_data'):
            record.structured_data = self._mask_structured_data(record.structured_data)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(self._mask_data(str(arg)) if isinstance(arg, str) else arg
                                for arg in record.args)

        # Tracebacks are rendered here so handlers only ever see the masked text
        if record.exc_info:
            record.exc_text = self._traceback_formatter.formatException(record.exc_info)
            record.exc_info = None
        if record.exc_text:
            record.exc_text = self._mask_data(record.exc_text)

        return True

    @staticmethod
    def _mask(secret: str) -> str:
        return secret[:4] + '*' * (len(secret) - 4)

    def _mask_data(self, text: str) -> str:
        masked_text = SECRET_ADDRESS_PATTERN.sub(lambda m: self._mask(m.group(0)), text)
        for pattern in self.sensitive_patterns:
            if pattern in masked_text:
                masked_text = masked_text.replace(pattern, self._mask(pattern))
        return masked_text

    def _mask_structured_data(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: self._mask_structured_data(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._mask_structured_data(item) for item in data]
        elif isinstance(data, str):
            return self._mask_data(data)
        else:
            return data

class LogManager:
    """Process wide logging setup"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
            return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.sensitive_filter = SensitiveDataFilter()
        self.handlers = []
        self.config = {
            'log_level': 'INFO',
            'log_format': LogFormat.TEXT,
            'log_file': None,
            'max_file_size': 10 * 1024 * 1024,
            'backup_count': 5,
            'enable_console': True,
        }

        self._initialized = True

    def configure(self, config: Dict[str, Any]) -> None:
        self.config.update(config)
        self._setup_logging_system()

    def _setup_logging_system(self) -> None:
        root = logging.getLogger()
        for handler in self.handlers:
            root.removeHandler(handler)
        self.handlers = []

        root.setLevel(getattr(logging, str(self.config['log_level']).upper()))
        formatter = StructuredFormatter(LogFormat(self.config['log_format']))

        if self.config['enable_console']:
            self.handlers.append(logging.StreamHandler(sys.stderr))

        log_file = self.config.get('log_file')
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            self.handlers.append(logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=self.config['max_file_size'],
                backupCount=self.config['backup_count'],
                encoding='utf-8'
            ))

        for handler in self.handlers:
            handler.setFormatter(formatter)
            handler.addFilter(self.sensitive_filter)
            root.addHandler(handler)

        # Third-party libraries
        for lib in ("urllib3", "requests"):
            logging.getLogger(lib).setLevel(logging.WARNING)

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None,
                  log_format: str = "text", max_bytes: int = 10 * 1024 * 1024,
                  backup_count: int = 5) -> None:
    """Install console and optional rotating file handlers on the root logger"""
    LogManager().configure({
        'log_level': log_level,
        'log_format': LogFormat(log_format),
        'log_file': log_file,
        'max_file_size': max_bytes,
        'backup_count': backup_count,
    })

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
