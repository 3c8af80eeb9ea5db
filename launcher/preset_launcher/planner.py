from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

@dataclass
class LaunchPlan:
    preset: str
    executable: str
    global_mods: List[str]
    server_mods: List[str]
    arguments: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "preset": self.preset,
            "executable": self.executable,
            "global_mods": list(self.global_mods),
            "server_mods": list(self.server_mods),
            "arguments": list(self.arguments),
            "notes": list(self.notes),
        }
