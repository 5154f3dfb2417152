"""Application services and the storage protocols they depend on."""
