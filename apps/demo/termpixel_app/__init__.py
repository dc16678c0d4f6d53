"""Terminal demos and tools built on the termpixel raster engine."""
