"""Domain protocols (ports) package.

Protocol definitions the domain layer depends on. Adapters implement them
structurally, without inheritance.

Usage:
    from src.domain.protocols import CodedValue, LoggerProtocol
"""

from src.domain.protocols.coded_value_protocol import CodedValue
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CodedValue",
    "LoggerProtocol",
]
