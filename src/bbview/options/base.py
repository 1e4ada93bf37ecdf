"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
by the bbview parser and renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from bbview.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build an instance from a configuration mapping.

        Keys may use hyphens or underscores. Unknown keys are rejected.

        Raises
        ------
        ValidationError
            If the mapping holds a key that is not an option field

        """
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ValidationError(
                    f"Unknown option '{key}' for {cls.__name__}", parameter_name=str(key), parameter_value=value
                )
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses should define renderer-specific options as frozen dataclass fields.

    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses should define parser-specific options as frozen dataclass fields.

    """
