"""
Base class for option holders configured from mappings.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, TypeVar, Union

from ..errors import UnknownOptionError
from ..utils import get_logger, normalize_option_key

TOptions = TypeVar("TOptions", bound="Options")


class Options:
    """
    Holder whose options are the settable properties declared on the class.

    Each property ``name`` keeps its value in ``self._name``; :meth:`to_dict`
    reads those attributes directly so getters with side effects never run.
    Keys are normalized before lookup, so ``identityProperty``,
    ``identity-property`` and ``identity_property`` address the same option.
    """

    __strict__: ClassVar[bool] = True
    __aliases__: ClassVar[Dict[str, str]] = {}

    def __init__(
        self,
        options: Optional[Union[Mapping[str, Any], "Options"]] = None,
        **kwargs: Any,
    ) -> None:
        self.logger = get_logger(f"options.{type(self).__name__}")
        if options is not None:
            self.set_from_mapping(options)
        if kwargs:
            self.set_from_mapping(kwargs)

    # ------------------------------------------------------------------ #
    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, property) and value.fset is not None and attr not in names:
                    names.append(attr)
        return tuple(names)

    @classmethod
    def canonical_name(cls, key: str) -> Optional[str]:
        name = normalize_option_key(key)
        name = cls.__aliases__.get(name, name)
        if name in cls.option_names():
            return name
        return None

    # ------------------------------------------------------------------ #
    def set(self: TOptions, key: str, value: Any) -> TOptions:
        name = self.canonical_name(key)
        if name is None:
            if self.__strict__:
                raise UnknownOptionError(
                    f'The option "{key}" does not match any option of {type(self).__name__}'
                )
            self.logger.debug("Skipping unknown option %s", key, extra={"option": key})
            return self
        setattr(self, name, value)
        return self

    def set_from_mapping(self: TOptions, options: Union[Mapping[str, Any], "Options"]) -> TOptions:
        if isinstance(options, Options):
            options = {key: value for key, value in options.to_dict().items() if value is not None}
        for key, value in options.items():
            self.set(key, value)
        self.logger.debug("Applied %s option(s)", len(options), extra={"options": sorted(options)})
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, f"_{name}", None) for name in self.option_names()}

    # ------------------------------------------------------------------ #
    def __setattr__(self, name: str, value: Any) -> None:
        if (
            not name.startswith("_")
            and name != "logger"
            and self.__strict__
            and name not in self.option_names()
        ):
            raise UnknownOptionError(
                f'The option "{name}" does not match any option of {type(self).__name__}'
            )
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"{type(self).__name__}({rendered})"
