class Node:
    def __init__(self, position, payload=None):
        self.position = position
        self.payload = payload
        self.left = None
        self.right = None

    def to_h(self):
        """Nested dict of this node and its subtrees. Empty child slots are left out."""
        data = {'position': self.position, 'payload': self.payload}
        if self.left is not None:
            data['left'] = self.left.to_h()
        if self.right is not None:
            data['right'] = self.right.to_h()
        return data

    def __repr__(self):
        return f"Node(position={self.position}, payload={self.payload})"
