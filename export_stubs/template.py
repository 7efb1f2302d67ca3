#!/usr/bin/env python3
"""Fixed C template for the generated export stubs."""
from typing import Iterable

EXPORT_MACRO = "EXPORT_FUNCTION"

# Order matters: ShowMessage must precede the macro that calls it.
PREAMBLE = r"""
#include <windows.h>
#include <stdio.h>

#define DLL_EXPORT __declspec(dllexport)

void ShowMessage(const char* msg)
{
    MessageBoxA(NULL, msg, "Notification", MB_OK | MB_ICONINFORMATION);
}

#define EXPORT_FUNCTION(name) \
    DLL_EXPORT void name() { \
        char msg[256]; \
        snprintf(msg, sizeof(msg), #name " called."); \
        ShowMessage(msg); \
    }
"""


def render_declaration(name: str) -> str:
    """Wrap a single export name in the export-function macro."""
    return f"{EXPORT_MACRO}({name})"


def render_source(names: Iterable[str]) -> str:
    """Render the preamble followed by one declaration line per name."""
    lines = [render_declaration(name) + "\n" for name in names]
    return PREAMBLE + "".join(lines)
