# triage/schema_flexibility.py

from collections.abc import Callable, Mapping

from rapidfuzz import fuzz, process, utils

from .models import SchemaFlexibility

NO_SCHEMA_REASON = "No schema found"
KEY_NOT_FOUND_REASON = "Schema key not found"
FLEXIBLE_REASON = "Schema allows additionalProperties"
RIGID_REASON = "Schema does not allow additionalProperties"

_PROPS_SUFFIX = "Props"

# Minimum WRatio score for a key to be reported as the closest candidate
_CLOSEST_KEY_CUTOFF = 70

SchemaKeyRule = Callable[[str, str], bool]


def _exact(key: str, component_name: str) -> bool:
    return key == component_name


def _props_suffixed(key: str, component_name: str) -> bool:
    return key == f"{component_name}{_PROPS_SUFFIX}"


def _props_stripped(key: str, component_name: str) -> bool:
    return key.endswith(_PROPS_SUFFIX) and key[: -len(_PROPS_SUFFIX)] == component_name


def _case_insensitive(key: str, component_name: str) -> bool:
    key_lower = key.lower()
    name_lower = component_name.lower()
    return key_lower in (name_lower, f"{name_lower}{_PROPS_SUFFIX.lower()}")


# Matching rules in priority order. Every key is tried against a rule before
# the next rule is consulted, so an exact match always beats a looser one.
SCHEMA_KEY_RULES: tuple[tuple[str, SchemaKeyRule], ...] = (
    ("exact", _exact),
    ("props_suffixed", _props_suffixed),
    ("props_stripped", _props_stripped),
    ("case_insensitive", _case_insensitive),
)


class ComponentSchemaIndex:
    """
    Lookup of component schemas from a conversation's `componentsSchema.$defs`.

    An index built without definitions resolves every component as not
    flexible: missing schema information is never treated as permissive.
    """

    def __init__(self, defs: Mapping[str, object] | None) -> None:
        self._defs = defs

    @classmethod
    def from_conversation(
        cls,
        conversation: Mapping[str, object] | None,
    ) -> "ComponentSchemaIndex":
        """
        Build an index from a parsed conversation record.

        Returns:
            ComponentSchemaIndex: Index over the record's `$defs`, empty if the
                record has none.
        """
        return cls(_schema_defs(conversation))

    @property
    def has_schema(self) -> bool:
        return self._defs is not None

    def find_key(self, component_name: str) -> str | None:
        """
        Find the `$defs` key describing a component.

        Returns:
            str | None: The first key matched by the highest-priority rule,
                or None if no rule matches.
        """
        if not self._defs:
            return None

        for _, rule in SCHEMA_KEY_RULES:
            for key in self._defs:
                if rule(key, component_name):
                    return key
        return None

    def resolve(self, component_name: str) -> SchemaFlexibility:
        """
        Decide whether a component's props schema allows extra properties.

        An explicit `additionalProperties: false` is the only thing that makes
        a found schema rigid; a schema silent on the flag is flexible.

        Returns:
            SchemaFlexibility: The verdict and the reason behind it.
        """
        if self._defs is None:
            return SchemaFlexibility(flexible=False, reason=NO_SCHEMA_REASON)

        key = self.find_key(component_name)
        if key is None:
            return SchemaFlexibility(
                flexible=False,
                reason=KEY_NOT_FOUND_REASON,
                closest_key=self._closest_key(component_name),
            )

        flexible = _additional_properties(self._defs[key]) is not False
        return SchemaFlexibility(
            flexible=flexible,
            reason=FLEXIBLE_REASON if flexible else RIGID_REASON,
            schema_key=key,
        )

    def _closest_key(self, component_name: str) -> str | None:
        """
        Suggest the most similar `$defs` key for a reviewer to inspect.

        Returns:
            str | None: The best fuzzy candidate, or None below the cutoff.
        """
        if not self._defs:
            return None

        best = process.extractOne(
            component_name,
            list(self._defs),
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=_CLOSEST_KEY_CUTOFF,
        )
        return best[0] if best else None


def resolve_schema_flexibility(
    conversation: Mapping[str, object] | None,
    component_name: str,
) -> SchemaFlexibility:
    """
    Resolve schema flexibility for one component of a conversation record.

    Returns:
        SchemaFlexibility: The verdict and the reason behind it.
    """
    return ComponentSchemaIndex.from_conversation(conversation).resolve(component_name)


def _schema_defs(
    conversation: Mapping[str, object] | None,
) -> Mapping[str, object] | None:
    """
    Extract `componentsSchema.$defs` from a conversation record.

    Returns:
        Mapping[str, object] | None: The definitions, or None if absent or
            not an object.
    """
    if not isinstance(conversation, Mapping):
        return None

    schema = conversation.get("componentsSchema")
    if not isinstance(schema, Mapping):
        return None

    defs = schema.get("$defs")
    return defs if isinstance(defs, Mapping) else None


def _additional_properties(schema: object) -> object:
    """
    Read `properties.props.additionalProperties` from a schema definition.

    Returns:
        object: The flag's value, or None when any level is missing.
    """
    properties = schema.get("properties") if isinstance(schema, Mapping) else None
    props = properties.get("props") if isinstance(properties, Mapping) else None
    return props.get("additionalProperties") if isinstance(props, Mapping) else None
