"""Pure resolution kernel: languages, source file sets and build/run policies."""
