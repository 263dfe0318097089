# numbers categorical values (features, class labels, etc.) in order of first encounter
class Numberer:
	def __init__(self, start_at=0):
		if start_at < 0:
			raise ValueError("invalid start_at " + str(start_at))

		self.values = list()		# id - start_at -> value
		self.numbers = dict()		# value -> id, derived from the above
		self.start_at = start_at	# ids below this are considered reserved by the caller

	def is_empty(self):
		return len(self.values) == 0

	def size(self):
		# one past the highest id issued
		return len(self.values) + self.start_at

	def add(self, value):
		"""
		Add a value. If the value has already been encountered before,
		the corresponding number is returned.
		"""
		n = self.numbers.get(value)

		if n is None:
			n = len(self.values) + self.start_at
			self.values.append(value)
			self.numbers[value] = n

		return n

	def number(self, item):
		"""Return the number for a value, None if it was never added."""
		return self.numbers.get(item)

	def value(self, number):
		"""Return the value for a number, None if it is out of range."""
		idx = number - self.start_at
		if idx < 0 or idx >= len(self.values):
			return None

		return self.values[idx]

	def items(self):
		for (idx, value) in enumerate(self.values):
			yield (idx + self.start_at, value)

	def _rebuild(self):
		# equal values keep the id of their last occurrence
		self.numbers = {value: idx + self.start_at for (idx, value) in enumerate(self.values)}

	def __contains__(self, value):
		return value in self.numbers

	def __iter__(self):
		return iter(self.values)

	def __eq__(self, other):
		if not isinstance(other, Numberer):
			return NotImplemented

		return self.start_at == other.start_at \
			and self.values == other.values \
			and self.numbers == other.numbers

	# mutable, so not usable as a dict key
	__hash__ = None

	def __repr__(self):
		return "Numberer(start_at=" + str(self.start_at) + ", values=" + str(len(self.values)) + ")"

	# the index is never pickled, only the values and the offset
	def __getstate__(self):
		return {"values": self.values, "start_at": self.start_at}

	def __setstate__(self, state):
		self.values = list(state["values"])
		self.start_at = state["start_at"]
		self._rebuild()
