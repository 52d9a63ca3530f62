"""
Key naming for the key-value store.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import hashlib

from config import KEY_PREFIX


def _slug(value: str) -> str:
    # Internal keys do not require reversibility; use strong stable hashing.
    return hashlib.sha256(value.encode()).hexdigest()[:32]


def transactions(user_id: str) -> str:
    return f"{KEY_PREFIX}:{_slug(user_id)}:transactions"
