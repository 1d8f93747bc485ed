"""
Embedded dataset of Nigerian states, senatorial districts and LGAs.
"""

from importlib.resources import files

DATASET_FILE = "states_and_lgas.json"


def read_dataset() -> bytes:
    """Raw JSON of the embedded dataset, read from the installed package."""
    return files(__name__).joinpath(DATASET_FILE).read_bytes()
