"""Disk Fragmenter: compacting files on a disk map."""

import bisect


def _checksum(disk):
    return sum(i * file_id for i, file_id in enumerate(disk) if file_id is not None)


def _free_runs(disk):
    """Sorted (start, end) runs of free blocks, end exclusive."""
    runs = []
    start = None
    for i, block in enumerate(disk):
        if block is None and start is None:
            start = i
        elif block is not None and start is not None:
            runs.append((start, i))
            start = None
    if start is not None:
        runs.append((start, len(disk)))
    return runs


def _file_start(disk, file_end):
    file_id = disk[file_end]
    start = file_end
    while start > 0 and disk[start - 1] == file_id:
        start -= 1
    return start


class Solution:
    """A dense disk map expanded into blocks of file ids and free space."""

    def __init__(self, text):
        self.disk = []
        digits = text.strip()
        for file_id, offset in enumerate(range(0, len(digits), 2)):
            self.disk.extend([file_id] * int(digits[offset]))
            if offset + 1 < len(digits):
                self.disk.extend([None] * int(digits[offset + 1]))

    def part1(self):
        """Checksum after moving single blocks into the leftmost free space."""
        disk = list(self.disk)
        try:
            free_idx = disk.index(None)
        except ValueError:
            raise ValueError("there are somehow no free blocks anywhere") from None

        file_idx = len(disk) - 1
        while disk[file_idx] is None:
            file_idx -= 1

        while file_idx > free_idx:
            disk[file_idx], disk[free_idx] = disk[free_idx], disk[file_idx]
            while disk[free_idx] is not None:
                free_idx += 1
            while disk[file_idx] is None:
                file_idx -= 1

        return _checksum(disk)

    def part2(self):
        """Checksum after moving whole files, highest id first, leftward."""
        disk = list(self.disk)
        free_runs = _free_runs(disk)

        file_end = len(disk) - 1
        while disk[file_end] is None:
            file_end -= 1
        file_start = _file_start(disk, file_end)

        while True:
            length = file_end - file_start + 1
            file_id = disk[file_end]

            chosen = None
            for start, end in free_runs:
                if start >= file_start:
                    break
                if end - start >= length:
                    chosen = (start, end)
                    break

            if chosen is not None:
                start, end = chosen
                moved = disk[file_start:file_start + length]
                disk[file_start:file_start + length] = disk[start:start + length]
                disk[start:start + length] = moved
                free_runs.remove(chosen)
                if start + length < end:
                    bisect.insort(free_runs, (start + length, end))

            if file_id == 0:
                break

            while disk[file_end] != file_id - 1:
                file_end -= 1
            file_start = _file_start(disk, file_end)

        return _checksum(disk)