"""
Identifier and random value generators
"""
from .guid_version import GuidVersion
from .guid_generator import (
    GuidGenerator,
    build_time_based_guid,
    generate_time_based_guid,
    generate_time_based_guid_for_node,
    get_default_generator,
    set_default_generator,
    set_default_node,
    set_default_clock_sequence,
    node_from_name,
    parse_identifier,
    to_bytes,
    to_text,
    get_version,
    get_timestamp,
    get_utc_datetime,
    get_local_datetime,
)
from .generators import (
    StringOptions,
    generate_random_string,
    generate_password,
    generate_username,
    generate_random_text,
    short_url_generator,
    search_phrase_valid,
)

__all__ = [
    'GuidVersion',
    'GuidGenerator',
    'build_time_based_guid',
    'generate_time_based_guid',
    'generate_time_based_guid_for_node',
    'get_default_generator',
    'set_default_generator',
    'set_default_node',
    'set_default_clock_sequence',
    'node_from_name',
    'parse_identifier',
    'to_bytes',
    'to_text',
    'get_version',
    'get_timestamp',
    'get_utc_datetime',
    'get_local_datetime',
    'StringOptions',
    'generate_random_string',
    'generate_password',
    'generate_username',
    'generate_random_text',
    'short_url_generator',
    'search_phrase_valid',
]
