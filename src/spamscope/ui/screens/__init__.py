# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views and modal dialogs.
#
#   - MainScreen: Email text, classification result, highlights
#   - DatasetScreen: Word table browser
#   - FilterScreen: Filter/sort dialog for the dataset browser
#   - PropertiesScreen: Dataset statistics and threshold control
#   - LoadEmailScreen: Pick an email text file
# =============================================================================

from spamscope.ui.screens.main import MainScreen
from spamscope.ui.screens.dataset import DatasetScreen
from spamscope.ui.screens.filter import FilterScreen
from spamscope.ui.screens.properties import PropertiesScreen
from spamscope.ui.screens.load_email import LoadEmailScreen

__all__ = [
    "MainScreen",
    "DatasetScreen",
    "FilterScreen",
    "PropertiesScreen",
    "LoadEmailScreen",
]
