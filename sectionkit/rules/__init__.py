from sectionkit.rules.loader import load_rules
from sectionkit.rules.models import SectionRules

__all__ = ["SectionRules", "load_rules"]
