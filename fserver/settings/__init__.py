"""Django settings for fserver.

Settings are split into components, each one responsible for a single
concern. Values that differ between environments are read with
python-decouple from the environment or ``config/.env``.
"""

from fserver.settings.components.common import *  # noqa: F403
from fserver.settings.components.logging import *  # noqa: F403
from fserver.settings.components.storages import *  # noqa: F403
from fserver.settings.components.uploads import *  # noqa: F403
