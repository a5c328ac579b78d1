from typing import Annotated

from pydantic import Field

from ..app import config

WorkerCount = Annotated[int, Field(gt=0, le=config.MAX_WORKERS_LIMIT)]
