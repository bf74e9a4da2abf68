"""State parks, camper passports and a database linking them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(eq=False)
class StatePark:
    """A park with its entrance fee, trail length and visiting campers."""

    park_name: str
    entrance_fee: float
    trail_miles: float
    campers: list = field(default_factory=list, repr=False)

    def add_camper(self, camper):
        """Record that ``camper`` visited this park."""
        self.campers.append(camper)


@dataclass(eq=False)
class Passport:
    """A camper's passport listing the parks visited."""

    camper_name: str
    is_junior: bool
    parks_visited: list = field(default_factory=list, repr=False)

    def add_park_visited(self, park):
        """Record a visit to ``park`` on both the passport and the park."""
        self.parks_visited.append(park)
        park.add_camper(self)


@dataclass(eq=False)
class Database:
    """All known parks and passports."""

    parks: list = field(default_factory=list)
    campers: list = field(default_factory=list)

    def add_state_park(self, park_name, entrance_fee, trail_miles):
        """Add a park and return it."""
        park = StatePark(park_name, entrance_fee, trail_miles)
        self.parks.append(park)
        return park

    def add_passport(self, camper_name, is_junior):
        """Add a passport and return it."""
        passport = Passport(camper_name, is_junior)
        self.campers.append(passport)
        return passport

    def add_park_to_passport(self, camper_name, park_name):
        """Link every camper named ``camper_name`` to every park named ``park_name``.

        Unknown names leave the database unchanged.
        """
        for camper in self.campers:
            if camper.camper_name != camper_name:
                continue
            for park in self.parks:
                if park.park_name == park_name:
                    camper.add_park_visited(park)


def load_parks(database, lines):
    """Add parks from ``name,fee,trail miles`` lines; blank lines are skipped.

    Raises ValueError for a malformed line.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        parts = line.split(",", 2)
        if len(parts) < 3:
            raise ValueError(f"malformed park line: {line!r}")
        name, fee, trail = parts
        database.add_state_park(name, float(fee), float(trail))


def load_campers(database, lines):
    """Add passports from ``name,junior, park, park...`` lines.

    Reading stops at the first empty line. The first character of each park
    field, the separating space, is dropped. Raises ValueError when the
    junior flag is not an integer.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if line == "":
            break
        name, *rest = line.split(",")
        if not rest:
            raise ValueError(f"missing junior flag: {line!r}")
        is_junior = bool(int(rest[0]))
        database.add_passport(name, is_junior)
        for park in rest[1:]:
            database.add_park_to_passport(name, park[1:])


def main(argv=None):
    """Load park_data.txt and camper_data.txt from a directory (default: current)."""
    args = sys.argv[1:] if argv is None else list(argv)
    directory = Path(args[0]) if args else Path(".")
    database = Database()
    try:
        with open(directory / "park_data.txt") as parks:
            load_parks(database, parks)
    except OSError:
        print("Error: could not open park data file")
        return 1
    try:
        with open(directory / "camper_data.txt") as campers:
            load_campers(database, campers)
    except OSError:
        print("Error: could not open camper data file")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())