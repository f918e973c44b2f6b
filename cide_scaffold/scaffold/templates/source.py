"""Minimal C++ entry point for fresh projects."""
from __future__ import annotations

MAIN_FILE_NAME = "main.cc"

MAIN_CC = (
    "int main(int argc, char** argv) {\n"
    "  \n"
    "}\n"
)
