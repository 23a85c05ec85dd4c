"""Build a Rust/WinRT component for each Windows target and pack it for NuGet."""

__version__ = "0.1.0"
