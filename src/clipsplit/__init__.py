"""Article reconstruction for newsclip archive bundles."""
