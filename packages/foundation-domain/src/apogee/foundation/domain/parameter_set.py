"""Per-flight-configuration parameter values with a guaranteed default.

FlightConfigurableParameterSet maps flight configuration ids to parameter
values. It always holds a default value, stored in its own slot, and zero or
more overrides keyed by non-default ids. Looking up an id without an override
yields the default.

Every mutation is followed by a refresh pass that calls ``update()`` on every
stored value, so derived state recomputes whenever any entry changes. Use
``batch_updates()`` to run a single refresh after a sequence of edits.

Example:
    >>> from apogee.foundation.domain import (
    ...     FlightConfigurableParameterSet,
    ...     FlightConfigurationId,
    ... )
    >>> params = FlightConfigurableParameterSet(default_motor)
    >>> fcid = FlightConfigurationId.generate()
    >>> params.set(fcid, other_motor)
    >>> params.get(fcid) is other_motor
    True
    >>> params.get(FlightConfigurationId.generate()) is default_motor
    True
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from apogee.foundation.domain.exceptions import (
    ConfigurationIndexError,
    InvalidConfigurationIdError,
    ValidationError,
)
from apogee.foundation.domain.identifiers import DEFAULT_VALUE_FCID
from apogee.foundation.domain.ports.configurable_parameter import (
    FlightConfigurableParameter,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apogee.foundation.domain.identifiers import FlightConfigurationId

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=FlightConfigurableParameter)

_DEBUG_LINE_FORMAT = "    [{key:<12}]: {value}\n"


class FlightConfigurableParameterSet(Generic[E]):
    """A parameter value that can vary by flight configuration.

    The default value is always defined and ``None`` is never a stored value.
    Overrides apply to a single flight configuration id each.

    Not thread-safe. The owner serializes access.

    Args:
        default_value: Value returned for ids without an override.

    Raises:
        ValidationError: If default_value is None.
    """

    def __init__(self, default_value: E) -> None:
        if default_value is None:
            raise ValidationError("default_value", "Default value must not be None")
        self._default: E = default_value
        self._overrides: dict[FlightConfigurationId, E] = {}
        self._batch_depth = 0
        self._refresh_pending = False

    @classmethod
    def copy_of(cls, other: FlightConfigurableParameterSet[E]) -> Self:
        """Return a new set holding deep copies of every entry in other.

        The copy shares no values with the source, so mutating a value in one
        never affects the other.

        Args:
            other: Set to copy.

        Returns:
            An independent set with equal default and equal overrides.
        """
        copied = cls(other._default.clone())
        copied._overrides = {
            fcid: value.clone() for fcid, value in other._overrides.items()
        }
        return copied

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy_of(self)

    # --- default slot ---

    def get_default(self) -> E:
        """Return the default value. Never None."""
        return self._default

    @property
    def default(self) -> E:
        """The default value."""
        return self._default

    def set_default(self, value: E) -> None:
        """Replace the default value.

        Does nothing, and skips the refresh pass, when value is equal to the
        current default.

        Args:
            value: New default value.

        Raises:
            ValidationError: If value is None.
        """
        if value is None:
            raise ValidationError("value", "Default value must not be None")
        if self.equals_default(value):
            return
        self._default = value
        logger.debug(
            "parameter_default_replaced",
            extra={"value_type": type(value).__name__},
        )
        self._after_mutation()

    def equals_default(self, value: E | None) -> bool:
        """Return True if value is equal to the current default.

        Compares by value. See ``is_using_default_instance`` for the identity
        check on a stored entry.
        """
        return self._default == value

    def is_using_default_instance(self, fcid: FlightConfigurationId) -> bool:
        """Return True if the entry stored under fcid is the default instance.

        Compares by identity: an override that is equal to the default but a
        distinct object reports False here while ``equals_default`` reports
        True for it. An id with no stored override also reports False. The
        default sentinel always reports True.
        """
        if fcid.is_default():
            return True
        return self._overrides.get(fcid) is self._default

    # --- lookup ---

    def get(self, fcid: FlightConfigurationId) -> E:
        """Return the value for fcid, falling back to the default.

        Args:
            fcid: Flight configuration id.

        Returns:
            The override for fcid if one exists, else the default. Never None.

        Raises:
            InvalidConfigurationIdError: If fcid carries the error marker.
        """
        if fcid.has_error():
            logger.warning("parameter_lookup_rejected", extra={"fcid": str(fcid)})
            raise InvalidConfigurationIdError(fcid, "retrieve")
        return self._overrides.get(fcid, self._default)

    def get_at(self, index: int) -> E:
        """Return the override at index in sorted id order.

        The default is not part of the positional list.

        Raises:
            ConfigurationIndexError: If index is outside ``[0, size())``.
        """
        ids = self.sorted_configuration_ids()
        if index < 0 or index >= len(ids):
            raise ConfigurationIndexError(index=index, size=len(ids))
        return self._overrides[ids[index]]

    def find_id(self, value: E | None) -> FlightConfigurationId | None:
        """Return the id of the first stored value equal to value.

        The default is checked first, then overrides in ascending id order,
        so the answer is deterministic when several ids hold equal values.

        Returns:
            The matching id, ``DEFAULT_VALUE_FCID`` if only the default
            matches, or None if value is None or nothing matches.
        """
        if value is None:
            return None
        if self._default == value:
            return DEFAULT_VALUE_FCID
        for fcid in self.sorted_configuration_ids():
            if self._overrides[fcid] == value:
                return fcid
        return None

    def size(self) -> int:
        """Return the number of overrides, excluding the default."""
        return len(self._overrides)

    def sorted_configuration_ids(self) -> list[FlightConfigurationId]:
        """Return a new list of override ids in ascending order.

        Never contains ``DEFAULT_VALUE_FCID``. Mutating the list does not
        affect the set.
        """
        return sorted(self._overrides)

    def ids(self) -> list[FlightConfigurationId]:
        """Alias of ``sorted_configuration_ids``."""
        return self.sorted_configuration_ids()

    # --- mutation ---

    def set(self, fcid: FlightConfigurationId, value: E | None) -> None:
        """Set or remove the override for fcid, then refresh every value.

        Args:
            fcid: Flight configuration id. The default sentinel addresses the
                default slot.
            value: New value, or None to remove the override for fcid.
                Removing an override that does not exist is not an error.

        Raises:
            InvalidConfigurationIdError: If fcid carries the error marker.
            ValidationError: If value is None and fcid is the default sentinel.
        """
        if fcid.has_error():
            raise InvalidConfigurationIdError(fcid, "store")
        if fcid.is_default():
            if value is None:
                raise ValidationError(
                    "value", "The default value cannot be removed", fcid=str(fcid)
                )
            self._default = value
            logger.debug(
                "parameter_default_replaced",
                extra={"value_type": type(value).__name__},
            )
        elif value is None:
            removed = self._overrides.pop(fcid, None)
            if removed is not None:
                logger.debug("parameter_override_removed", extra={"fcid": str(fcid)})
        else:
            self._overrides[fcid] = value
            logger.debug("parameter_override_set", extra={"fcid": str(fcid)})
        self._after_mutation()

    def reset(self, fcid: FlightConfigurationId | None = None) -> None:
        """Fall back to the default for fcid, or for every id if fcid is None.

        Resetting a single id is a no-op for the error id and for the default
        sentinel. Resetting everything keeps the current default and refreshes
        only if at least one override was removed.
        """
        if fcid is not None:
            if fcid.is_valid() and not fcid.is_default():
                self.set(fcid, None)
            return

        removed = len(self._overrides)
        if not removed:
            return
        self._overrides.clear()
        logger.debug("parameter_overrides_cleared", extra={"removed": removed})
        self._after_mutation()

    def clone_configuration(
        self,
        old_fcid: FlightConfigurationId,
        new_fcid: FlightConfigurationId,
    ) -> FlightConfigurationId:
        """Copy the effective value of old_fcid into an override for new_fcid.

        The new override is a deep copy, so later edits to either id do not
        leak into the other.

        Returns:
            new_fcid.

        Raises:
            InvalidConfigurationIdError: If either id carries the error marker.
        """
        copied = self.get(old_fcid).clone()
        self.set(new_fcid, copied)
        logger.debug(
            "parameter_configuration_cloned",
            extra={"source_fcid": str(old_fcid), "target_fcid": str(new_fcid)},
        )
        return new_fcid

    # --- refresh ---

    def update(self) -> None:
        """Call ``update()`` on the default and on every override."""
        self._refresh_pending = False
        self._default.update()
        for value in self._overrides.values():
            value.update()

    @contextmanager
    def batch_updates(self) -> Iterator[Self]:
        """Defer the per-mutation refresh pass until the block exits.

        Mutations inside the block run no refresh of their own. On exit one
        refresh pass runs if anything changed, including when the block
        raises. Nested blocks refresh once, when the outermost exits.

        Example:
            >>> with params.batch_updates():
            ...     params.set(first, motor_a)
            ...     params.set(second, motor_b)
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._refresh_pending:
                self.update()

    def _after_mutation(self) -> None:
        if self._batch_depth:
            self._refresh_pending = True
        else:
            self.update()

    # --- diagnostics ---

    def describe(self) -> str:
        """Return a multi-line dump of the overrides for debugging.

        Overrides are listed in ascending id order. An override that is the
        default instance itself has its key wrapped in asterisks.
        """
        lines = [
            f"====== Dumping FlightConfigurableParameterSet"
            f"<{type(self._default).__name__}> ({self.size()} configurations)\n"
        ]
        for fcid in self.sorted_configuration_ids():
            value = self._overrides[fcid]
            key = fcid.to_short_key()
            if value is self._default:
                key = f"*{key}*"
            lines.append(_DEBUG_LINE_FORMAT.format(key=key, value=value))
        return "".join(lines)

    # --- container protocol ---

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[E]:
        """Iterate the default, then overrides in ascending id order."""
        yield self._default
        for fcid in self.sorted_configuration_ids():
            yield self._overrides[fcid]

    def __contains__(self, fcid: object) -> bool:
        if fcid == DEFAULT_VALUE_FCID:
            return True
        return fcid in self._overrides

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"default={self._default!r}, overrides={self.size()})"
        )
