import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ReportResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    report_id: uuid.UUID
