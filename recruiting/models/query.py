from typing import List, Optional

from pydantic import BaseModel


class ConsultantSearchCriteria(BaseModel):
    """Search form: every non-blank criterion is ANDed into the filter."""
    name: Optional[str] = None
    last_name: Optional[str] = None
    skills: Optional[str] = None  # comma separated

    def has_name(self) -> bool:
        return bool(self.name and self.name.strip())

    def has_last_name(self) -> bool:
        return bool(self.last_name and self.last_name.strip())

    def skill_list(self) -> List[str]:
        if not self.skills:
            return []
        return [s.strip() for s in self.skills.split(",") if s.strip()]
