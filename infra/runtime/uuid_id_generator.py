from __future__ import annotations

import uuid


class UuidIdGenerator:
    def new_invocation_id(self) -> str:
        return f"inv-{uuid.uuid4().hex[:12]}"
