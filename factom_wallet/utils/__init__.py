from factom_wallet.utils.logging import setup_logging, get_logger, SensitiveDataFilter

__all__ = [
    'setup_logging',
    'get_logger',
    'SensitiveDataFilter'
]
