"""Origin-destination pairs representing travel demands or queries, and their CSV import."""

from dataclasses import dataclass

from roadnet.constants import INVALID_ID
from roadnet.strings import lexical_cast

_TRIM_CHARS = " \t"


@dataclass
class OriginDestination:
    """A travel demand of a given volume from an origin to a destination vertex."""

    origin: int
    destination: int
    volume: int

    def _sort_key(self):
        return self.origin, self.destination

    def __lt__(self, other):
        if not isinstance(other, OriginDestination):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass
class ClusteredOriginDestination(OriginDestination):
    """An OD-pair that also records the zones of its origin and destination."""

    origin_zone: int = INVALID_ID
    destination_zone: int = INVALID_ID

    def _sort_key(self):
        return self.origin_zone, self.destination_zone, self.origin, self.destination

    def __lt__(self, other):
        if not isinstance(other, ClusteredOriginDestination):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def has_same_zones(self, other):
        """Return True if the other pair has the same origin and destination zone."""
        return (
            self.origin_zone == other.origin_zone
            and self.destination_zone == other.destination_zone
        )


def _read_rows(path, columns, required):
    """Yield dicts of integer values for the named columns of a CSV file.

    Lines starting with '#' and blank lines are skipped; columns not asked
    for are ignored; optional columns that are absent are left out.
    """
    with open(path, newline="", encoding="utf-8") as f:
        records = (
            (line_no, line.rstrip("\r\n"))
            for line_no, line in enumerate(f, start=1)
            if not line.startswith("#") and line.strip(_TRIM_CHARS + "\r\n")
        )
        first = next(records, None)
        if first is None:
            raise ValueError(f"missing header line in '{path}'")
        names = [name.strip(_TRIM_CHARS) for name in first[1].split(",")]
        positions = {}
        for pos, name in enumerate(names):
            if name in columns:
                if name in positions:
                    raise ValueError(f"duplicate column '{name}' in '{path}'")
                positions[name] = pos
        for name in required:
            if name not in positions:
                raise ValueError(f"missing column '{name}' in '{path}'")
        for line_no, line in records:
            fields = line.split(",")
            if len(fields) != len(names):
                raise ValueError(
                    f"expected {len(names)} columns, got {len(fields)} "
                    f"in line {line_no} of '{path}'"
                )
            yield {
                name: lexical_cast(fields[pos].strip(_TRIM_CHARS), int)
                for name, pos in positions.items()
            }


def _check_non_negative(row, names, path):
    for name in names:
        if row[name] < 0:
            raise ValueError(f"negative {name} -- {row[name]} in '{path}'")


def import_od_pairs(path):
    """Read OD-pairs from a CSV file with columns origin, destination and volume."""
    columns = ("origin", "destination", "volume")
    pairs = []
    for row in _read_rows(path, columns, columns):
        _check_non_negative(row, columns, path)
        pairs.append(OriginDestination(row["origin"], row["destination"], row["volume"]))
    return pairs


def import_clustered_od_pairs(path):
    """Read clustered OD-pairs from a CSV file.

    The columns origin, destination and volume are required; origin_zone and
    destination_zone are optional and default to INVALID_ID.
    """
    columns = ("origin", "destination", "origin_zone", "destination_zone", "volume")
    required = ("origin", "destination", "volume")
    pairs = []
    for row in _read_rows(path, columns, required):
        _check_non_negative(row, ("origin", "destination"), path)
        pairs.append(
            ClusteredOriginDestination(
                origin=row["origin"],
                destination=row["destination"],
                volume=row["volume"],
                origin_zone=row.get("origin_zone", INVALID_ID),
                destination_zone=row.get("destination_zone", INVALID_ID),
            )
        )
    return pairs