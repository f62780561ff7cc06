"""Store Configuration: parses raw provider values once into a typed snapshot.

Invariants:
    - Id lists are parsed here; the rest of the core never sees raw strings
    - A non-integer id token raises ConfigurationError (no silent default)
    - Empty tokens ("1,,2", trailing comma) are skipped
    - All flags are independent; no flag implies another
"""

from dataclasses import dataclass

from b2b_gate.core.domain_types import CategoryId, GroupId, ConfigKey
from b2b_gate.core.errors import ConfigurationError
from b2b_gate.core.repository_protocols import ConfigurationProvider


@dataclass(frozen=True)
class B2BConfiguration:
    """Process-wide activation settings, read-only for one request."""
    require_login: bool = False
    extension_active: bool = False
    global_customer_activation: bool = False
    activate_by_customer_group: bool = False
    activate_by_category: bool = False
    activated_customer_group_ids: frozenset[GroupId] = frozenset()
    activated_category_ids: tuple[CategoryId, ...] = ()
    add_to_cart_replacement_text: str = ""


def parse_id_list(raw: str | None, key: str) -> list[int]:
    """Parse a comma-separated id list such as "3,7, 12"."""
    if not raw:
        return []
    ids: list[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            ids.append(int(token))
        except ValueError:
            raise ConfigurationError(
                key, f"'{token}' is not a numeric id",
            ) from None
    return ids


def load_configuration(provider: ConfigurationProvider) -> B2BConfiguration:
    """Read every ConfigKey from the provider and build the typed snapshot."""
    group_ids = parse_id_list(
        provider.get_string(ConfigKey.ACTIVATED_CUSTOMER_GROUPS.value),
        ConfigKey.ACTIVATED_CUSTOMER_GROUPS.value,
    )
    category_ids = parse_id_list(
        provider.get_string(ConfigKey.ACTIVATED_CATEGORIES.value),
        ConfigKey.ACTIVATED_CATEGORIES.value,
    )
    return B2BConfiguration(
        require_login=provider.get_flag(ConfigKey.REQUIRE_LOGIN.value),
        extension_active=provider.get_flag(ConfigKey.EXTENSION_ACTIVE.value),
        global_customer_activation=provider.get_flag(
            ConfigKey.GLOBAL_CUSTOMER_ACTIVATION.value,
        ),
        activate_by_customer_group=provider.get_flag(
            ConfigKey.ACTIVATE_BY_CUSTOMER_GROUP.value,
        ),
        activate_by_category=provider.get_flag(
            ConfigKey.ACTIVATE_BY_CATEGORY.value,
        ),
        activated_customer_group_ids=frozenset(GroupId(i) for i in group_ids),
        # dict.fromkeys keeps configured order while dropping duplicates
        activated_category_ids=tuple(
            CategoryId(i) for i in dict.fromkeys(category_ids)
        ),
        add_to_cart_replacement_text=provider.get_string(
            ConfigKey.ADD_TO_CART_REPLACEMENT.value,
        ),
    )
