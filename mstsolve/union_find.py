from .errors import InvalidSizeError, VertexOutOfRangeError


class DisjointSet:
    '''Union-find over vertices ``0..n_verts-1``.

    Both arrays are flat lists indexed by vertex. ``find`` compresses paths
    and ``union`` hangs the smaller tree under the larger root.
    '''

    def __init__(self, n_verts: int) -> None:
        if n_verts < 1:
            raise InvalidSizeError(n_verts)
        self.parent = [i for i in range(n_verts)]
        self.size = [1] * n_verts
        self.count = n_verts

    def __len__(self) -> int:
        return len(self.parent)

    def _validate(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise VertexOutOfRangeError(index, len(self.parent))

    def find(self, index: int) -> int:
        self._validate(index)
        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # point everything on the path straight at the root
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]
        return root

    def union(self, i: int, j: int) -> bool:
        self._validate(i)
        self._validate(j)
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.size[i] < self.size[j]:
            i, j = j, i
        self.parent[j] = i
        self.size[i] += self.size[j]
        self.count -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        self._validate(i)
        self._validate(j)
        return self.find(i) == self.find(j)

    def component_size(self, index: int) -> int:
        return self.size[self.find(index)]

    def roots(self) -> list[int]:
        return [x for x in range(len(self.parent)) if self.parent[x] == x]
