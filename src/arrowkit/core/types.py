"""Reusable constrained types for the Arrowkit records.

Type Aliases:
    Age: A non-negative integer age in years.
    Amount: A non-negative number (prices, salaries, marks).
    Name: A non-empty string.
"""

from typing import Annotated, Union

import annotated_types as at

__all__ = ["Age", "Amount", "Name"]

Age = Annotated[int, at.Ge(0)]

Amount = Annotated[Union[int, float], at.Ge(0)]

Name = Annotated[str, at.MinLen(1)]
