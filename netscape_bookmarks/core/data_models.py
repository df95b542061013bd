"""
Data models for Netscape bookmark files.

This module defines the tree used to represent a bookmark export in memory:
folders holding an ordered list of bookmarks and sub-folders. Optional
attributes that were not present in the source document are kept as None so
that their absence survives a parse/serialize round trip.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


@dataclass
class Bookmark:
    """A single link entry (``<DT><A HREF=...>``)."""

    href: str = ""
    name: str = ""
    add_date: Optional[int] = None
    last_modified: Optional[int] = None
    icon: Optional[str] = None
    icon_uri: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert bookmark to an ordered mapping for interchange.

        Absent optional fields are omitted rather than written as null.

        Returns:
            Dictionary representation of the bookmark
        """
        data: Dict[str, Any] = {"href": self.href, "name": self.name}
        if self.add_date is not None:
            data["addDate"] = self.add_date
        if self.last_modified is not None:
            data["lastModified"] = self.last_modified
        if self.icon is not None:
            data["icon"] = self.icon
        if self.icon_uri is not None:
            data["iconUri"] = self.icon_uri
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Bookmark":
        """Create a bookmark from its interchange mapping."""
        return cls(
            href=data.get("href", ""),
            name=data.get("name", ""),
            add_date=data.get("addDate"),
            last_modified=data.get("lastModified"),
            icon=data.get("icon"),
            icon_uri=data.get("iconUri"),
        )


@dataclass
class Folder:
    """
    A folder (``<DT><H3>``) and its children in document order.

    The root of a bookmark file is also a Folder; see BookmarkFile.
    """

    name: str = ""
    add_date: Optional[int] = None
    last_modified: Optional[int] = None
    personal_toolbar_folder: Optional[bool] = None
    items: List["Item"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert folder and all of its descendants to interchange mappings.

        Returns:
            Dictionary representation of the folder tree
        """
        data: Dict[str, Any] = {"name": self.name}
        if self.add_date is not None:
            data["addDate"] = self.add_date
        if self.last_modified is not None:
            data["lastModified"] = self.last_modified
        if self.personal_toolbar_folder is not None:
            data["personalToolbarFolder"] = self.personal_toolbar_folder
        data["items"] = [item.to_dict() for item in self.items]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Folder":
        """Create a folder tree from its interchange mapping."""
        return cls(
            name=data.get("name", ""),
            add_date=data.get("addDate"),
            last_modified=data.get("lastModified"),
            personal_toolbar_folder=data.get("personalToolbarFolder"),
            items=[item_from_dict(child) for child in data.get("items", [])],
        )


Item = Union[Folder, Bookmark]

# The whole document is represented by its root folder.
BookmarkFile = Folder


def is_folder(item: Item) -> bool:
    """Return True if the item is a folder (i.e. it carries child items)."""
    return isinstance(item, Folder)


def item_from_dict(data: Mapping[str, Any]) -> Item:
    """
    Rebuild a Folder or Bookmark from an interchange mapping.

    A mapping is a folder if and only if it has an ``items`` key.
    """
    if "items" in data:
        return Folder.from_dict(data)
    return Bookmark.from_dict(data)


def count_items(folder: Folder) -> Tuple[int, int]:
    """
    Count the folders and bookmarks below a folder.

    Args:
        folder: Folder to inspect (not counted itself)

    Returns:
        Tuple of (folder_count, bookmark_count)
    """
    folder_count = 0
    bookmark_count = 0

    for item in folder.items:
        if is_folder(item):
            child_folders, child_bookmarks = count_items(item)
            folder_count += 1 + child_folders
            bookmark_count += child_bookmarks
        else:
            bookmark_count += 1

    return folder_count, bookmark_count
