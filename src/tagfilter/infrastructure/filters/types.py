"""Filter type alias.

Python 3.12+ PEP 695 type alias syntax.
Filter function: takes TestDescriptor, returns a FilterResult.
"""

from collections.abc import Callable

from tagfilter.domain.model.descriptor import TestDescriptor
from tagfilter.domain.model.filter_result import FilterResult

type PostDiscoveryFilter = Callable[[TestDescriptor], FilterResult]
