"""
Exceptions raised by the transaction store.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


class StoreError(Exception):
    pass


class CorruptRecord(StoreError):
    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Corrupt record under {key}: {reason}")
        self.key = key
        self.reason = reason
