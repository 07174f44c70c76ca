"""
Reduction mixin defining the public MDArray reduction API.

This module declares :class:`MDArrayMixinReduction`, an abstract mixin that
specifies whole-array reductions. Implementations are registered per numeric
dtype via the control-path dispatch mechanism.
"""

from typing import Any
from abc import ABC

from .....domain._mdarray import IMDArray


class MDArrayMixinReduction(ABC):
    """
    Abstract mixin defining scalar reductions over every stored element.
    """

    def sum(self: IMDArray) -> Any:
        """
        Sum of every element.

        Returns
        -------
        Any
            Python scalar of the array's element kind. An array without
            elements sums to the additive identity.
        """
        ...

    def prod(self: IMDArray) -> Any:
        """
        Product of every element.

        Returns
        -------
        Any
            Python scalar of the array's element kind. The accumulation
            starts from the multiplicative identity, so an array without
            elements yields 1.
        """
        ...
