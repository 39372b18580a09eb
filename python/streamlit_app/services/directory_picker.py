"""
Directory picker for the server path configuration dialog

Opens the native folder dialog on the machine running the app. This is a
local desktop tool, so the Streamlit server and the user share a screen.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickResult:
    canceled: bool
    paths: List[str] = field(default_factory=list)

    @property
    def selected(self) -> Optional[str]:
        """First picked path, or None if the dialog was canceled"""
        if self.canceled or not self.paths:
            return None
        return self.paths[0]


class DirectoryPicker(Protocol):
    def pick(self, default_path: Optional[str] = None, title: str = "") -> PickResult:
        ...


class TkDirectoryPicker:
    """Folder dialog through tkinter"""

    def pick(self, default_path: Optional[str] = None,
             title: str = "Select server directory") -> PickResult:
        try:
            import tkinter
            from tkinter import filedialog

            root = tkinter.Tk()
        except Exception as e:
            # Headless hosts have no display to attach the dialog to
            logger.error(f"Folder dialog unavailable: {e}")
            return PickResult(canceled=True)

        try:
            root.withdraw()
            root.wm_attributes('-topmost', 1)
            selected = filedialog.askdirectory(
                parent=root,
                initialdir=default_path or None,
                title=title,
                mustexist=True,
            )
        finally:
            root.destroy()

        if not selected:
            return PickResult(canceled=True)
        return PickResult(canceled=False, paths=[selected])
