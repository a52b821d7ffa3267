"""Common literal values used across rport_pages.

These constants keep component names and artefact filenames centralized so
page modules, the builder, and tests can import the same values without
drifting. Intended for internal use within the rport_pages package.

Examples
--------
>>> from rport_pages import _constants
>>> _constants.PAGE_DATA_TEMPLATE.format(key="v-79a3b5bd")
'.rport-pages-v-79a3b5bd-data.json'
>>> _constants.OUTBOUND_LINK
'OutboundLink'
"""

PAGE_DATA_TEMPLATE = ".rport-pages-{key}-data.json"
OUTBOUND_LINK = "OutboundLink"
EXTERNAL_LINK_ATTRS = {"target": "_blank", "rel": "noopener noreferrer"}
