"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large generated-source document (~200KB)."""
    sections = []
    for i in range(1000):
        sections.append(f"""
public partial class Entity{i} {{
    public int Id {{ get; set; }}
    //<Custom>
    partial void OnCreated() {{ Log("created {{" + Id + "}}"); }}
    //</Custom>
    public string Name {{ get; set; }} = "//<Custom> in a string";
}}
""")
    return "\n".join(sections)
