"""
Data loading and caching module for the cluster plotter.

This module handles all data loading operations including:
- Reading the survey table (CSV via pandas, FITS binary tables via astropy)
- Building one ClusterEntity per record (galactocentric X shift applied here)
- Magnitude -> radius normalization
- Appending the reference body (Sun) to the scene set
- Caching loaded datasets in memory
"""

import math
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd
from astropy.io import fits

from cluster_plotter.src.config import DEFAULT_FRAME_OFFSET_X
from cluster_plotter.src.data.entity import ClusterEntity, Point3D
from cluster_plotter.utils.colordefinitions import (
    GALAXY_COLOR,
    MAX_METALLICITY,
    MIN_METALLICITY,
    SUN_COLOR,
)
from cluster_plotter.utils.magnitude import MAX_RADIUS, MIN_RADIUS, normalize_radii

ID_COLUMN = "ID"
POSITION_COLUMNS = ("X", "Y", "Z")

SUN_ID = "Sun"
GALAXY_ID = "MilkyWay"
DEFAULT_REFERENCE_RADIUS = 0.2

FITS_EXTENSIONS = (".fits", ".fit", ".fts", ".fits.gz")


class DatasetError(Exception):
    """Raised when a dataset cannot be loaded at all."""


def read_records(path: str) -> List[Dict[str, str]]:
    """
    Read a survey table into raw records.

    Every value is returned as a string; numeric parsing is deferred to the
    point of use.

    Raises:
        DatasetError: If the file does not exist or cannot be parsed
    """
    if not os.path.exists(path):
        raise DatasetError(f"Data file not found: {path}")

    try:
        if path.lower().endswith(FITS_EXTENSIONS):
            return _read_fits_records(path)
        return _read_csv_records(path)
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise DatasetError(f"Could not read {path}: {e}") from e


def _read_csv_records(path: str) -> List[Dict[str, str]]:
    with open(path, "r", newline="", encoding="utf-8") as handle:
        try:
            df = pd.read_csv(handle, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return []
    df.columns = [str(column).strip() for column in df.columns]
    return df.to_dict(orient="records")


def _read_fits_records(path: str) -> List[Dict[str, str]]:
    with fits.open(path) as hdul:
        table_hdu = next(
            (hdu for hdu in hdul if isinstance(hdu, (fits.BinTableHDU, fits.TableHDU))), None
        )
        if table_hdu is None:
            raise DatasetError(f"No table extension found in {path}")
        data = table_hdu.data
        names = list(data.columns.names)
        records = []
        for row in data:
            records.append({name: _fits_value_to_str(row[name]) for name in names})
    return records


def _fits_value_to_str(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").strip()
    return str(value).strip()


def _parse_float(value, default: Optional[float] = None) -> Optional[float]:
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if math.isfinite(parsed) else default


def build_entities(
    records: Iterable[Mapping[str, str]],
    frame_offset_x: float = DEFAULT_FRAME_OFFSET_X,
    pericenter_column: str = "RPERI",
    apocenter_column: str = "RAPO",
    angular_momentum_columns: Tuple[str, str, str] = ("LX", "LY", "LZ"),
    metallicity_domain: Tuple[float, float] = (MIN_METALLICITY, MAX_METALLICITY),
) -> Tuple[List[ClusterEntity], int]:
    """
    Build one ClusterEntity per raw record.

    The X coordinate is shifted by ``frame_offset_x`` to move from the
    Sun-centred to the galaxy-centred frame. Every column except ``ID`` is
    copied verbatim into ``properties``. Records whose X/Y/Z do not parse
    are skipped.

    Returns:
        Tuple (entities, skipped_count)

    Raises:
        DatasetError: If the records lack the ID/X/Y/Z columns
    """
    entities: List[ClusterEntity] = []
    skipped = 0
    columns_checked = False

    for record in records:
        if not columns_checked:
            missing = [c for c in (ID_COLUMN,) + POSITION_COLUMNS if c not in record]
            if missing:
                raise DatasetError(f"Missing required columns: {', '.join(missing)}")
            columns_checked = True

        coords = [_parse_float(record.get(column)) for column in POSITION_COLUMNS]
        if any(value is None for value in coords):
            skipped += 1
            continue
        x, y, z = coords

        properties = {
            str(key): ("" if value is None else str(value))
            for key, value in record.items()
            if key != ID_COLUMN
        }

        entity = ClusterEntity(
            id=str(record.get(ID_COLUMN, "")),
            position=Point3D(x + frame_offset_x, y, z),
            properties=properties,
            pericenter=_parse_float(record.get(pericenter_column), 0.0),
            apocenter=_parse_float(record.get(apocenter_column), 0.0),
            angular_momentum=tuple(
                _parse_float(record.get(column), 0.0) for column in angular_momentum_columns
            ),
            metallicity_domain=metallicity_domain,
        )
        entities.append(entity)

    return entities, skipped


def create_sun_entity(frame_offset_x: float = DEFAULT_FRAME_OFFSET_X,
                      radius: float = DEFAULT_REFERENCE_RADIUS) -> ClusterEntity:
    """The observer's home position, drawn as a yellow sphere."""
    return ClusterEntity(
        id=SUN_ID,
        position=Point3D(frame_offset_x, 0.0, 0.0),
        color=SUN_COLOR,
        radius=radius,
    )


def create_galaxy_entity() -> ClusterEntity:
    """Milky Way reference values, used as an optional marker on the scatter plot."""
    return ClusterEntity(
        id=GALAXY_ID,
        position=Point3D(0.0, 0.0, 0.0),
        color=GALAXY_COLOR,
        properties={
            "Age1": "13.61",
            "Age2": "13.61",
            "[Fe/H]": "0.02",
            "FeH": "0.02",
        },
    )


class DataLoader:
    """Handles loading and caching of cluster survey data."""

    def __init__(self, config=None):
        """
        Initialize DataLoader with configuration.

        Args:
            config: Configuration object with data path and rendering settings
        """
        self.config = config
        self.data_cache: Dict[str, Dict[str, Any]] = {}  # In-memory cache

    def _setting(self, name, default):
        if self.config is None:
            return default
        return getattr(self.config, name, default)

    def load_data(self, path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load and prepare a dataset for visualization.

        Args:
            path: Survey table to load (default: configured data file)

        Returns:
            Dict containing:
            - entities: ClusterEntity list, reference body (Sun) last
            - property_names: Property keys of the first record (plot axes)
            - magnitude_range: (min, max) magnitude used for radius scaling
            - galaxy: Milky Way reference entity for the scatter plot
            - source: Path the data was read from
            - skipped_records: Records dropped for unparsable coordinates

        Raises:
            DatasetError: If no path is configured, the file is unreadable or
                holds no usable records
        """
        if path is None:
            path = self._setting("data_file", None)
        if not path:
            raise DatasetError("No data file configured")

        # Check cache first
        if path in self.data_cache:
            print(f"✓ [Cache HIT] Using cached data for {os.path.basename(path)}")
            return self.data_cache[path]

        print(f"⏳ [Cache MISS] Loading survey data from: {path}")

        records = read_records(path)
        if not records:
            raise DatasetError(f"No records found in {path}")

        entities, skipped = build_entities(
            records,
            frame_offset_x=self._setting("frame_offset_x", DEFAULT_FRAME_OFFSET_X),
            pericenter_column=self._setting("pericenter_column", "RPERI"),
            apocenter_column=self._setting("apocenter_column", "RAPO"),
            angular_momentum_columns=self._setting("angular_momentum_columns", ("LX", "LY", "LZ")),
            metallicity_domain=self._setting("metallicity_domain", (MIN_METALLICITY, MAX_METALLICITY)),
        )
        if skipped:
            print(f"⚠️  Skipped {skipped} records with unparsable X/Y/Z coordinates")
        if not entities:
            raise DatasetError(f"No records with valid coordinates in {path}")

        magnitude_range = normalize_radii(
            entities,
            min_radius=self._setting("min_radius", MIN_RADIUS),
            max_radius=self._setting("max_radius", MAX_RADIUS),
        )
        print(f"Magnitude range: {magnitude_range[0]:.2f} to {magnitude_range[1]:.2f}")

        property_names = list(entities[0].properties.keys())

        # Reference body is appended after normalization, with its own radius
        entities.append(
            create_sun_entity(
                self._setting("frame_offset_x", DEFAULT_FRAME_OFFSET_X),
                self._setting("reference_radius", DEFAULT_REFERENCE_RADIUS),
            )
        )
        for index, entity in enumerate(entities):
            entity.index = index

        data = {
            "entities": entities,
            "property_names": property_names,
            "magnitude_range": magnitude_range,
            "galaxy": create_galaxy_entity(),
            "source": path,
            "skipped_records": skipped,
        }

        self.data_cache[path] = data
        print(f"✓ Loaded {len(entities) - 1} clusters ({len(property_names)} properties)")
        return data

    def clear_cache(self) -> None:
        """Clear the data cache so the next load re-reads the file."""
        self.data_cache.clear()
        print("Data cache cleared")

    def get_cached_sources(self) -> list:
        """Get list of currently cached data files."""
        return list(self.data_cache.keys())
