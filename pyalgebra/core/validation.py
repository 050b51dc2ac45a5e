"""
Input validation utilities for PyAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion; the element type of the input is kept
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyalgebra.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    ElementTypeError,
)


def check_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Validate an element type.
    
    Only real integer and floating dtypes are accepted. Booleans, complex
    numbers, strings and objects are rejected.
    
    Args:
        dtype: Anything numpy accepts as a dtype
        name: Parameter name for error messages
        
    Returns:
        The normalized numpy dtype
        
    Raises:
        ValidationError: If the dtype is not a real numeric type
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {e}") from e
    
    if not (np.issubdtype(result, np.integer) or np.issubdtype(result, np.floating)):
        raise ValidationError(
            f"{name}: unsupported element type {result}, expected an integer or floating dtype"
        )
    return result


def check_rectangular(data: Any, name: str) -> None:
    """
    Verify nested-sequence input is not ragged.
    
    numpy arrays are rectangular by construction and pass unchecked.
    
    Args:
        data: Raw user input
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If rows have differing lengths
    """
    if isinstance(data, np.ndarray) or not isinstance(data, Sequence):
        return
    rows = [row for row in data if isinstance(row, Sequence)]
    if len(rows) != len(data):
        return
    lengths = sorted({len(row) for row in rows})
    if len(lengths) > 1:
        raise DimensionError(
            f"{name}: rows have differing lengths {lengths}, expected a rectangular matrix"
        )


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and any dtype that is not a real integer or floating type.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Element type to cast to, or None to keep the inferred one
        
    Returns:
        numpy.ndarray with integer or floating dtype
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If nested-sequence input is ragged
    """
    check_rectangular(array, name)
    
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    check_dtype(result.dtype, name)

    if dtype is not None:
        target = check_dtype(dtype, "dtype")
        if result.dtype != target:
            result = result.astype(target)

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            actual=array.shape,
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.
    
    Args:
        array: 2D array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If the matrix is degenerate
    """
    rows, columns = array.shape
    if rows < 1 or columns < 1:
        raise DimensionError(
            f"{name}: degenerate matrix with shape ({rows}, {columns}), "
            f"need at least 1 row and 1 column",
            actual=array.shape,
        )


def check_size(value: Any, name: str) -> int:
    """
    Validate a row or column count.
    
    Args:
        value: Requested size
        name: Parameter name for error messages
        
    Returns:
        The size as a Python int
        
    Raises:
        InvalidArgumentError: If value is not an integer
        DimensionError: If value is less than 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}",
            argument=name,
            value=value,
        )
    size = int(value)
    if size < 1:
        raise DimensionError(f"{name}: must be at least 1, got {size}")
    return size


def check_same_shape(a: NDArray[Any], b: NDArray[Any], names: tuple[str, str]) -> None:
    """
    Verify two arrays have identical shapes.
    
    Args:
        a, b: Arrays to compare
        names: Parameter names for error messages
        
    Raises:
        DimensionError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"{names[1]}: shape {b.shape} does not match {names[0]} shape {a.shape}",
            expected=a.shape,
            actual=b.shape,
        )


def check_inner_dimensions(a: NDArray[Any], b: NDArray[Any], names: tuple[str, str]) -> None:
    """
    Verify columns(a) == rows(b) for a matrix product.
    
    Args:
        a, b: Left and right operands
        names: Parameter names for error messages
        
    Raises:
        DimensionError: If the inner dimensions differ
    """
    if a.shape[1] != b.shape[0]:
        raise DimensionError(
            f"Inner dimensions differ: {names[0]} has {a.shape[1]} columns "
            f"but {names[1]} has {b.shape[0]} rows",
            expected=(a.shape[1], b.shape[1]),
            actual=b.shape,
        )


def check_same_dtype(a: NDArray[Any], b: NDArray[Any], names: tuple[str, str]) -> None:
    """
    Verify two arrays share the same element type.
    
    Args:
        a, b: Arrays to compare
        names: Parameter names for error messages
        
    Raises:
        ElementTypeError: If dtypes differ
    """
    if a.dtype != b.dtype:
        raise ElementTypeError(
            f"{names[1]}: element type {b.dtype} does not match {names[0]} "
            f"element type {a.dtype}",
            expected=str(a.dtype),
            actual=str(b.dtype),
        )


def _is_integral(value: numbers.Real) -> bool:
    """True if a real number has no fractional part. Never converts ints to float."""
    if isinstance(value, numbers.Integral):
        return True
    return float(value).is_integer()


def check_scalar(scalar: Any, dtype: np.dtype, name: str) -> np.generic:
    """
    Convert a scalar to the given element type without loss.
    
    Args:
        scalar: Real number to convert
        dtype: Target element type
        name: Parameter name for error messages
        
    Returns:
        The scalar as a numpy scalar of ``dtype``
        
    Raises:
        ValidationError: If scalar is not a real number
        ElementTypeError: If scalar is not exactly representable as an integer
            for an integer dtype, or is outside the range of ``dtype``
    """
    if isinstance(scalar, (bool, np.bool_)) or not isinstance(scalar, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(scalar).__name__} {scalar!r}"
        )
    if np.issubdtype(dtype, np.integer):
        if not _is_integral(scalar):
            raise ElementTypeError(
                f"{name}: {scalar!r} is not representable in element type {dtype}",
                expected=str(dtype),
                actual=type(scalar).__name__,
            )
        info = np.iinfo(dtype)
        if not info.min <= int(scalar) <= info.max:
            raise ElementTypeError(
                f"{name}: {scalar!r} is outside the range of element type {dtype} "
                f"[{info.min}, {info.max}]",
                expected=str(dtype),
                actual=type(scalar).__name__,
            )
        return dtype.type(int(scalar))

    info = np.finfo(dtype)
    try:
        with np.errstate(over='ignore'):
            value = dtype.type(scalar)
    except OverflowError as e:
        raise ElementTypeError(
            f"{name}: {scalar!r} is outside the range of element type {dtype} "
            f"[{info.min}, {info.max}]",
            expected=str(dtype),
            actual=type(scalar).__name__,
        ) from e
    scalar_is_inf = isinstance(scalar, (float, np.floating)) and bool(np.isinf(scalar))
    if np.isinf(value) and not scalar_is_inf:
        raise ElementTypeError(
            f"{name}: {scalar!r} is outside the range of element type {dtype} "
            f"[{info.min}, {info.max}]",
            expected=str(dtype),
            actual=type(scalar).__name__,
        )
    return value


def check_bounds(
    lower_bound: Any,
    upper_bound: Any,
    dtype: np.dtype,
) -> tuple[Any, Any]:
    """
    Validate the bounds of a uniform random fill.
    
    Args:
        lower_bound: Inclusive lower bound, or None
        upper_bound: Exclusive upper bound, or None
        dtype: Element type the values will be drawn in
        
    Returns:
        (lower_bound, upper_bound) as Python numbers
        
    Raises:
        InvalidArgumentError: If a bound is missing, non-numeric, non-finite,
            not integral for an integer dtype, outside the range of ``dtype``,
            or lower_bound >= upper_bound
    """
    is_integer_dtype = np.issubdtype(dtype, np.integer)

    for arg, value in (("lower_bound", lower_bound), ("upper_bound", upper_bound)):
        if value is None:
            raise InvalidArgumentError(
                f"{arg}: required for a random matrix",
                argument=arg,
                value=value,
            )
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise InvalidArgumentError(
                f"{arg}: expected a real number, got {type(value).__name__} {value!r}",
                argument=arg,
                value=value,
            )
        if isinstance(value, numbers.Integral):
            # int range is checked against the dtype below
            continue
        try:
            finite = bool(np.isfinite(float(value)))
        except OverflowError as e:
            raise InvalidArgumentError(
                f"{arg}: {value!r} exceeds the range of element type {dtype}",
                argument=arg,
                value=value,
            ) from e
        if not finite:
            raise InvalidArgumentError(
                f"{arg}: must be finite, got {value!r}",
                argument=arg,
                value=value,
            )
        if is_integer_dtype and not _is_integral(value):
            raise InvalidArgumentError(
                f"{arg}: {value!r} is not an integer, required for element type {dtype}",
                argument=arg,
                value=value,
            )
    
    if not lower_bound < upper_bound:
        raise InvalidArgumentError(
            f"lower_bound ({lower_bound!r}) must be less than upper_bound ({upper_bound!r})",
            argument="lower_bound",
            value=lower_bound,
        )
    
    if is_integer_dtype:
        low, high = int(lower_bound), int(upper_bound)
        info = np.iinfo(dtype)
        # upper_bound is exclusive, so max + 1 is still drawable
        if low < info.min or high > info.max + 1:
            raise InvalidArgumentError(
                f"bounds [{low}, {high}) exceed the range of element type {dtype} "
                f"[{info.min}, {info.max}]",
                argument="lower_bound" if low < info.min else "upper_bound",
                value=low if low < info.min else high,
            )
        return low, high

    finfo = np.finfo(dtype)
    converted = []
    for arg, value in (("lower_bound", lower_bound), ("upper_bound", upper_bound)):
        try:
            number = float(value)
        except OverflowError as e:
            raise InvalidArgumentError(
                f"{arg}: {value!r} exceeds the range of element type {dtype} "
                f"[{finfo.min}, {finfo.max}]",
                argument=arg,
                value=value,
            ) from e
        if not float(finfo.min) <= number <= float(finfo.max):
            raise InvalidArgumentError(
                f"{arg}: {value!r} exceeds the range of element type {dtype} "
                f"[{finfo.min}, {finfo.max}]",
                argument=arg,
                value=value,
            )
        converted.append(number)

    low, high = converted
    if not dtype.type(low) < dtype.type(high):
        raise InvalidArgumentError(
            f"bounds [{low!r}, {high!r}) collapse to a single value in element type {dtype}",
            argument="upper_bound",
            value=upper_bound,
        )
    return low, high
