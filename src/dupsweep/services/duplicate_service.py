from typing import Dict, Iterable, List

from dupsweep.core.models import DuplicateGroup


class DuplicateService:
    @staticmethod
    def remove_files_from_groups(groups: List[DuplicateGroup], file_paths: Iterable[str]) -> List[DuplicateGroup]:
        """
        Removes files with the specified paths from all duplicate groups.

        Files that match any of the provided file paths are removed from each group.
        Groups that contain fewer than 2 files after removal are discarded.

        Args:
            groups (List[DuplicateGroup]): List of duplicate groups to update.
            file_paths (Iterable[str]): Paths of files to remove (typically the deleted ones).

        Returns:
            List[DuplicateGroup]: Updated list of duplicate groups.
        """
        removed = set(file_paths)
        updated_groups = []
        for group in groups:
            filtered_files = [f for f in group.files if f.path not in removed]
            if len(filtered_files) >= 2:
                updated_groups.append(
                    DuplicateGroup(group_key=group.group_key, size=group.size, files=filtered_files)
                )
        return updated_groups

    @staticmethod
    def select_all_but_one(groups: List[DuplicateGroup]) -> List[str]:
        """
        Selects every file except the first one of each group for deletion.
        """
        files_to_delete = []
        for group in groups:
            for file in group.files[1:]:
                files_to_delete.append(file.path)
        return files_to_delete

    @staticmethod
    def summarize(groups: List[DuplicateGroup]) -> Dict[str, int]:
        """Counts groups, listed files and bytes freed by keeping one copy per group."""
        return {
            "groups": len(groups),
            "files": sum(len(g.files) for g in groups),
            "reclaimable_bytes": sum(g.reclaimable_bytes for g in groups),
        }
