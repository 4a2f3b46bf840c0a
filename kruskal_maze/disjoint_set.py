class DisjointSet:
    """
    Disjoint Set Union (Union-Find) over the integers 0 .. size-1.

    Purpose:
      - Tracks which cells of the maze are already joined by carved passages
      - Each set has a representative "root" element
      - Used by the carver to reject walls whose removal would create a cycle

    Algorithm:
      - find follows parent pointers to the root and flattens the chain
        (path compression)
      - union attaches the shorter tree below the taller one (union by rank)
      - Time complexity: O(α(n)) amortized per operation

    Integration:
      - One instance per maze, created with every cell in its own set
      - The carving loop runs until all_connected() reports a single component
    """
    def __init__(self, size):
        self.parent = list(range(size))  # parent[i] -> next element towards the root
        self.rank = [0] * size           # rank[root] -> upper bound on tree height
        self.component_count = size

    def __len__(self):
        return len(self.parent)

    def find(self, x):
        """Returns the representative of the set containing x."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression: point every node on the chain directly at the root
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a, b):
        """
        Merges the sets whose representatives are a and b.

        Parameters:
          a, b (int): Representatives, as returned by find. Passing anything
                      else leaves the structure inconsistent.

        Returns:
          int: Representative of the merged set
        """
        if a == b:
            return a
        # Union by rank
        if self.rank[a] < self.rank[b]:
            a, b = b, a
        self.parent[b] = a
        if self.rank[a] == self.rank[b]:
            self.rank[a] += 1
        self.component_count -= 1
        return a

    def connected(self, a, b):
        return self.find(a) == self.find(b)

    def all_connected(self):
        """True once no more than one set remains (also true for an empty structure)."""
        return self.component_count <= 1
