"""
Jinja2 build conditions.

Lets build files express platform conditions as Jinja2 expressions, the
same way playbooks write ``when:`` clauses::

    'unix' is os_family and os.arch == 'x86_64'
    is_os(family='windows', arch='amd64')
    'win9x' is not os_family

Tests: os_family, os_name, os_arch, os_version.
Globals: is_os(), os (snapshot facts), os_current_family.
"""

from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, Undefined, UndefinedError
from jinja2 import TemplateError as JinjaTemplateError

from osfamily.errors import ConditionError, OsFamilyError
from osfamily.evaluator import Query, matches
from osfamily.resolver import resolve_current_family
from osfamily.snapshot import Snapshot, current_snapshot


class ConditionEngine:
    """
    Jinja2 environment bound to one snapshot.

    Provides:
    - os_family / os_name / os_arch / os_version tests
    - is_os() global taking any of family, name, arch, version
    - ``os`` mapping with the snapshot facts and resolved family
    """

    def __init__(self, snapshot: Optional[Snapshot] = None):
        if snapshot is None:
            snapshot = current_snapshot()
        self.snapshot = snapshot

        self.env = Environment(
            undefined=StrictUndefined,
            # Don't auto-escape (we're not rendering HTML)
            autoescape=False,
        )

        self.env.tests['os_family'] = lambda value: self._match(family=value)
        self.env.tests['os_name'] = lambda value: self._match(name=value)
        self.env.tests['os_arch'] = lambda value: self._match(arch=value)
        self.env.tests['os_version'] = lambda value: self._match(version=value)

        current = resolve_current_family(snapshot)
        self.env.globals['is_os'] = self._match
        self.env.globals['os_current_family'] = current
        self.env.globals['os'] = dict(snapshot.as_dict(), family=current)

    def _match(
        self,
        family: Optional[str] = None,
        name: Optional[str] = None,
        arch: Optional[str] = None,
        version: Optional[str] = None,
    ) -> bool:
        for value in (family, name, arch, version):
            if isinstance(value, Undefined):
                # StrictUndefined raises UndefinedError on str()
                str(value)
        query = Query(family=family, name=name, arch=arch, version=version)
        return matches(query, self.snapshot)

    def evaluate(self, condition: str, variables: Optional[Dict[str, Any]] = None) -> bool:
        """
        Evaluate a condition expression.

        Args:
            condition: Jinja2 expression (without {{ }})
            variables: Extra variables available to the expression

        Returns:
            Boolean result of the condition

        Raises:
            ConditionError: If the expression is invalid, uses undefined names
                or fails while being evaluated
            ClassificationError: If the expression tests an unknown family
        """
        if not condition or not condition.strip():
            return True

        template_str = "{{ " + condition.strip() + " }}"
        try:
            template = self.env.from_string(template_str)
            result = template.render(variables or {})
        except OsFamilyError:
            raise
        except UndefinedError as e:
            raise ConditionError(f"Undefined variable: {e}", expression=condition)
        except TemplateSyntaxError as e:
            raise ConditionError(f"Syntax error: {e}", expression=condition)
        except JinjaTemplateError as e:
            raise ConditionError(str(e), expression=condition)
        except Exception as e:
            raise ConditionError(f"{type(e).__name__}: {e}", expression=condition)

        return self._to_bool(result)

    @staticmethod
    def _to_bool(value: Any) -> bool:
        """Convert a rendered value to boolean (Ansible-style)."""
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            value_lower = value.lower().strip()
            if value_lower in ('true', 'yes', '1', 'on'):
                return True
            if value_lower in ('false', 'no', '0', 'off', '', 'none'):
                return False
            return bool(value.strip())
        return bool(value)


def evaluate_condition(
    condition: str,
    snapshot: Optional[Snapshot] = None,
    variables: Optional[Dict[str, Any]] = None,
) -> bool:
    """Convenience function to evaluate one condition against a snapshot."""
    return ConditionEngine(snapshot).evaluate(condition, variables)
