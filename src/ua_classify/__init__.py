"""Rule-based User-Agent classification.

>>> from ua_classify import parse
>>> ua = parse(
...     "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:102.0) "
...     "Gecko/20100101 Firefox/102.0"
... )
>>> str(ua)
'Browser Firefox 102.0 Desktop Windows 10.0'
"""

from .classifier import parse
from .rules import RULES, Rule
from .user_agent import UserAgent

__all__ = ["RULES", "Rule", "UserAgent", "parse"]
