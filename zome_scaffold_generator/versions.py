"""Dependency versions pinned into generated Cargo manifests."""

from typing import Final

# crates.io <https://crates.io/crates/holochain_deterministic_integrity/versions>
HOLOCHAIN_DETERMINISTIC_INTEGRITY_VERSION: Final = "0.0.11"

# crates.io <https://crates.io/crates/serde/versions>
SERDE_VERSION: Final = "1"
