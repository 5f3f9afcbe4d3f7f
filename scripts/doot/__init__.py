"""
doot - find TODO markers in a source tree and browse them in the terminal.

Architecture:
- providers.py: Data types and the protocols the presenter talks through
- walker.py / extractor.py: Ignore-aware file walk and marker extraction
- scan_provider.py: Combines the two into an annotation provider
- presenter.py: Presenter state, rendering and input handling
- views/: Textual screen/widget components
- app.py: Textual host for the presenter
- cli.py: Command-line entry point

Extensibility points:
1. New marker syntax: pass a pattern to FileScanProvider
2. New hosts: implement the RenderTarget and EventSource protocols
3. New views: Add to views/, push from app.py
"""

__version__ = "0.1.0"
