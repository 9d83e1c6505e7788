"""Domain errors.

Every error carries an ``ErrorKind`` and a stable ``code`` so callers can map
failures to user-facing messages without inspecting exception types.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a domain failure."""

    VALIDATION = "validation"
    TOPOLOGY = "topology"
    NOT_FOUND = "not_found"
    CORRUPT_STATE = "corrupt_state"


class SubwayError(Exception):
    """Base class for all subway network errors."""

    kind: ErrorKind = ErrorKind.VALIDATION
    code: str = "SUBWAY_ERROR"
    default_message: str = "Subway network operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# Validation faults


class DomainValidationError(SubwayError):
    kind = ErrorKind.VALIDATION
    code = "INVALID_VALUE"
    default_message = "Invalid value"


class InvalidDistanceError(DomainValidationError):
    code = "INVALID_DISTANCE"
    default_message = "Distance must be a positive number of meters"


class NegativeFareError(DomainValidationError):
    code = "NEGATIVE_FARE"
    default_message = "Fare cannot be negative"


class BlankValueError(DomainValidationError):
    code = "BLANK_VALUE"
    default_message = "Value must not be blank"


class SameStationSectionError(DomainValidationError):
    code = "SAME_STATION_SECTION"
    default_message = "A section must connect two different stations"


class DuplicateStationNameError(DomainValidationError):
    code = "DUPLICATE_STATION_NAME"
    default_message = "A station with this name already exists"


class DuplicateLineNameError(DomainValidationError):
    code = "DUPLICATE_LINE_NAME"
    default_message = "A line with this name already exists"


# Topology faults


class TopologyError(SubwayError):
    kind = ErrorKind.TOPOLOGY
    code = "TOPOLOGY_ERROR"
    default_message = "Section change violates the line topology"


class SectionNotConnectableError(TopologyError):
    code = "SECTION_NOT_CONNECTABLE"
    default_message = "Neither station of the section is on the line"


class DuplicateSectionError(TopologyError):
    code = "DUPLICATE_SECTION"
    default_message = "The line already has a section between these stations"


class DistanceExceedsSectionError(TopologyError):
    code = "DISTANCE_EXCEEDS_SECTION"
    default_message = "The new section must be shorter than the section it splits"


class InvalidSectionError(TopologyError):
    code = "INVALID_SECTION"
    default_message = "The section cannot be added to the line"


class StationNotOnLineError(TopologyError):
    code = "STATION_NOT_ON_LINE"
    default_message = "The station is not on the line"


class CannotDeleteLastSectionError(TopologyError):
    code = "CANNOT_DELETE_LAST_SECTION"
    default_message = "A line must keep at least one section"


# Not-found faults


class NotFoundError(SubwayError):
    kind = ErrorKind.NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Resource not found"


class StationNotFoundError(NotFoundError):
    code = "STATION_NOT_FOUND"
    default_message = "Station not found"


class LineNotFoundError(NotFoundError):
    code = "LINE_NOT_FOUND"
    default_message = "Line not found"


# Corrupt-state faults


class CorruptSectionsError(SubwayError):
    """The stored edge set does not form a single simple path."""

    kind = ErrorKind.CORRUPT_STATE
    code = "CORRUPT_SECTIONS"
    default_message = "Sections do not form a single path"
