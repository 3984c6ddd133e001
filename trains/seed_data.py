"""Reference data inserted when the train schema is (re)created.

Rows are keyed by table name and use model attribute names. Tables are listed
in foreign-key order.
"""

from datetime import date, datetime
from typing import Any, Dict, List

SeedData = Dict[str, List[Dict[str, Any]]]

SEED_DATA: SeedData = {
    "station": [
        {"id": 1, "name": "hbf-salzburg"},
        {"id": 2, "name": "hbf-wien"},
        {"id": 3, "name": "hbf-linz"},
    ],
    "city": [
        {"id": 1, "name": "salzburg", "station_id": 1},
        {"id": 2, "name": "wien", "station_id": 2},
        {"id": 3, "name": "linz", "station_id": 3},
    ],
    "platform": [
        {"id": 1, "number": "1", "station_id": 1},
        {"id": 2, "number": "2", "station_id": 1},
        {"id": 3, "number": "1", "station_id": 2},
        {"id": 4, "number": "2", "station_id": 2},
        {"id": 5, "number": "1", "station_id": 3},
        {"id": 6, "number": "2", "station_id": 3},
    ],
    "traintype": [
        {"id": 1, "name": "ICE"},
        {"id": 2, "name": "S-Bahn"},
        {"id": 3, "name": "REX"},
    ],
    "train": [
        {"number": 1, "train_type_id": 3, "acquisition_date": date(2020, 9, 4)},
        {"number": 2, "train_type_id": 2, "acquisition_date": date(2019, 1, 5)},
        {"number": 3, "train_type_id": 1, "acquisition_date": date(2021, 12, 24)},
    ],
    "train_has_platform": [
        {"train_number": 1, "platform_id": 2, "is_start": True},
        {"train_number": 1, "platform_id": 3, "is_start": False},
        {"train_number": 2, "platform_id": 4, "is_start": True},
        {"train_number": 2, "platform_id": 5, "is_start": False},
        {"train_number": 3, "platform_id": 1, "is_start": False},
        {"train_number": 3, "platform_id": 6, "is_start": True},
    ],
    "route": [
        {
            "id": 7,
            "arrival": datetime(2023, 12, 4, 9, 30),
            "departure": datetime(2023, 12, 4, 8, 0),
            "train_number": 1,
            "direction": True,
        },
        {
            "id": 8,
            "arrival": datetime(2023, 12, 4, 11, 30),
            "departure": datetime(2023, 12, 4, 10, 0),
            "train_number": 1,
            "direction": False,
        },
        {
            "id": 9,
            "arrival": datetime(2023, 12, 4, 13, 0),
            "departure": datetime(2023, 12, 4, 12, 0),
            "train_number": 2,
            "direction": True,
        },
        {
            "id": 10,
            "arrival": datetime(2023, 12, 4, 14, 15),
            "departure": datetime(2023, 12, 4, 13, 15),
            "train_number": 2,
            "direction": False,
        },
        {
            "id": 11,
            "arrival": datetime(2023, 12, 4, 6, 30),
            "departure": datetime(2023, 12, 4, 5, 45),
            "train_number": 3,
            "direction": True,
        },
        {
            "id": 12,
            "arrival": datetime(2023, 12, 4, 7, 25, 0, 556000),
            "departure": datetime(2023, 12, 4, 6, 40, 0, 493000),
            "train_number": 3,
            "direction": False,
        },
    ],
}
