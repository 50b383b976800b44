"""Line classifier mixins for the block scanner.

Each mixin recognizes one kind of block line and returns the matching
variant, or None so the scanner can try the next rule.
"""

from noteweave.scanner.classifiers.fence import FenceClassifierMixin
from noteweave.scanner.classifiers.heading import HeadingClassifierMixin
from noteweave.scanner.classifiers.list import ListClassifierMixin
from noteweave.scanner.classifiers.quote import QuoteClassifierMixin
from noteweave.scanner.classifiers.rule import RuleClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "RuleClassifierMixin",
]
