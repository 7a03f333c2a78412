from binpatch.constants import VERSION as __version__
