# bindle_core/constants.py

BINDLE_VERSION = "1.0.0"
KEYRING_VERSION = "1.0.0"

# Partitions the fixed metadata lines from the parcel digests in a cleartext
CLEARTEXT_SEPARATOR = "~"

TOML_MIME_TYPE = "application/toml"

INVOICE_ENDPOINT = "_i"
RELATIONSHIP_ENDPOINT = "_r"
