"""Services module"""

from hosei.services.hosei_checker import HoseiChecker, HoseiResult

__all__ = [
    "HoseiChecker",
    "HoseiResult",
]
