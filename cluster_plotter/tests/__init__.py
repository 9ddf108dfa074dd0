"""
Test package for the cluster plotter modules.

Contains tests for all modular components including the entity model, data
loading, projection, trend fitting, animation, visualization, callbacks and
UI components.
"""

import os
import tempfile


# Test utilities
def create_test_records():
    """Create raw survey records (all values as strings) for testing purposes"""
    return [
        {"ID": "NGC104", "X": "1.9", "Y": "-2.6", "Z": "-3.1", "[Fe/H]": "-0.72",
         "M_V,t": "-9.42", "RPERI": "5.5", "RAPO": "7.4", "Age": "12.75"},
        {"ID": "NGC6121", "X": "1.8", "Y": "-0.3", "Z": "0.6", "[Fe/H]": "-1.16",
         "M_V,t": "-7.19", "RPERI": "0.6", "RAPO": "6.0", "Age": "12.50"},
        {"ID": "NGC7078", "X": "4.5", "Y": "8.7", "Z": "-4.7", "[Fe/H]": "-2.37",
         "M_V,t": "-9.19", "RPERI": "6.3", "RAPO": "10.7", "Age": "13.25"},
        {"ID": "Pal5", "X": "19.4", "Y": "0.2", "Z": "16.7", "[Fe/H]": "-1.41",
         "M_V,t": "-5.17", "RPERI": "", "RAPO": "", "Age": ""},
        {"ID": "Broken", "X": "n/a", "Y": "1.0", "Z": "1.0", "[Fe/H]": "-1.0",
         "M_V,t": "-6.0", "RPERI": "1.0", "RAPO": "2.0", "Age": "10.0"},
    ]


def create_test_entities():
    """Create ClusterEntity objects with indices assigned, as the loader does"""
    from cluster_plotter.src.data.loader import build_entities

    entities, _ = build_entities(create_test_records())
    for index, entity in enumerate(entities):
        entity.index = index
    return entities


def write_test_csv(records=None, directory=None):
    """Write records to a temporary CSV file and return its path"""
    import pandas as pd

    records = create_test_records() if records is None else records
    handle, path = tempfile.mkstemp(suffix=".csv", dir=directory)
    os.close(handle)
    pd.DataFrame(records).to_csv(path, index=False)
    return path


def create_test_config(data_file="data/clusters.csv", directory=None, extra=""):
    """Write a temporary INI configuration file and return its path"""
    directory = directory or tempfile.mkdtemp()
    path = os.path.join(directory, "test_config.ini")
    with open(path, "w") as f:
        f.write(
            "[paths]\n"
            f"data_file = {data_file}\n"
            f"export_dir = {os.path.join(directory, 'exports')}\n"
            "\n"
            "[ingestion]\n"
            "frame_offset_x = 8.2\n"
            "\n"
            "[rendering]\n"
            "min_radius = 0.05\n"
            "max_radius = 0.5\n"
        )
        f.write(extra)
    return path


__all__ = ["create_test_records", "create_test_entities", "write_test_csv", "create_test_config"]
