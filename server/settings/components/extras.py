"""Extra (sidecar) file settings."""

from server.settings.components import config

# Directory deleted extras are moved to. Empty means delete permanently.
EXTRAS_RECYCLE_BIN = config('EXTRAS_RECYCLE_BIN', default='')

# Days a recycled extra is kept before cleanup_recycle_bin removes it
EXTRAS_RECYCLE_BIN_CLEANUP_DAYS = config(
    'EXTRAS_RECYCLE_BIN_CLEANUP_DAYS',
    cast=int,
    default=7,
)

# Per-kind deletion policy used when a media file is deleted.
# Metadata is regenerated on demand, so it skips the recycle bin.
EXTRAS_PERMANENTLY_DELETE = {
    'subtitle': config('EXTRAS_SUBTITLE_PERMANENTLY_DELETE', cast=bool, default=False),
    'metadata': config('EXTRAS_METADATA_PERMANENTLY_DELETE', cast=bool, default=True),
    'other': config('EXTRAS_OTHER_PERMANENTLY_DELETE', cast=bool, default=False),
}
