"""
Test data generators for parsing benchmarks.

Creates JSON documents that stay inside the subset basicjson reads:
- No bracket characters inside string values
- Backslash escapes only in strings of the outermost object
- Keys without ':' characters
- Different sizes (small/large) and shapes (flat/nested/mixed)
"""

import json
import random
import string
from typing import Any

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object() -> str:
    """Generates a large JSON object (> 10KB) with many fields."""
    data = {
        "user_id": random.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "email": f"{_random_string(8)}@{_random_string(6)}.com",
            "address": {
                "street": f"{random.randint(1, 9999)} {_random_string(8)} St",
                "city": _random_string(12),
                "zip": f"{random.randint(10000, 99999)}",
                "country": "US",
            },
            "notifications": {
                "email": random.choice([True, False]),
                "sms": random.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "timestamp": f"2024-{random.randint(1, 12):02d}-{random.randint(1, 28):02d}T{random.randint(0, 23):02d}:{random.randint(0, 59):02d}:00Z",
                "description": f"Payment for {_random_string(20)}",
                "status": random.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "action": random.choice(
                    ["login", "logout", "purchase", "view", "update"]
                ),
                "ip_address": f"{random.randint(1, 255)}.{random.randint(1, 255)}.{random.randint(1, 255)}.{random.randint(1, 255)}",
                "user_agent": f"Mozilla/5.0 ({_random_string(20)})",
            }
            for _ in range(30)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(10),
                    "score": round(random.uniform(0, 100), 2),
                }
            )

    return json.dumps(array)


def _generate_nested_structure() -> str:
    """Generates nested object and array structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    data = create_nested_dict(6)
    return json.dumps(data)


def _generate_string_heavy() -> str:
    """
    Generates a flat object of strings full of backslash escapes.

    Escapes are kept at the top level since each nested body consumes one
    layer of backslashes.
    """

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(random.choice(['"', "\\", "/", "\n", "\t"]))
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    data: dict[str, str] = {}
    for i in range(100):
        data[f"string_{i}"] = create_escaped_string()
        data[f"path_{i}"] = (
            f"C:\\Users\\{_random_string(8)}\\Documents\\file_{i}.txt"
        )
    return json.dumps(data)


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
