import json

from config import DefaultConfig
from numberer import Numberer


class DuplicateValueError(ValueError):
	def __init__(self, value, first, second):
		super().__init__("value " + repr(value) + " occurs at positions " + str(first) + " and " + str(second))
		self.value = value
		self.first = first
		self.second = second


# Serialized representation for Numberer.
#
# Only the values and the offset are stored, since the value -> number
# index holds the same information and is rebuilt on load.
class SerializedNumberer:
	FIELDS = ("values", "start_at")

	def __init__(self, values, start_at):
		self.values = values
		self.start_at = start_at

	@staticmethod
	def from_numberer(numberer):
		return SerializedNumberer(list(numberer.values), numberer.start_at)

	def to_numberer(self, config=None):
		if config is None:
			config = DefaultConfig()

		first_seen = dict()
		for (idx, value) in enumerate(self.values):
			first = first_seen.setdefault(value, idx)
			if first == idx:
				continue
			elif config.reject_duplicates:
				raise DuplicateValueError(value, first, idx)
			elif config.warn_on_duplicates:
				print("serialized numberer has duplicate value " + repr(value) + " at positions " \
					+ str(first) + " and " + str(idx) + ", keeping number " + str(idx + self.start_at))

		numberer = Numberer(self.start_at)
		numberer.values = list(self.values)
		numberer._rebuild()

		return numberer

	def to_dict(self):
		return {"values": list(self.values), "start_at": self.start_at}

	@staticmethod
	def from_dict(data):
		if not isinstance(data, dict):
			raise ValueError("serialized numberer must be a mapping, got " + type(data).__name__)
		elif set(data.keys()) != set(SerializedNumberer.FIELDS):
			raise ValueError("serialized numberer must have exactly the fields " + str(SerializedNumberer.FIELDS) \
				+ ", got " + str(sorted(data.keys())))

		values = data["values"]
		start_at = data["start_at"]

		if not isinstance(values, list):
			raise ValueError("invalid values of type " + type(values).__name__)
		# bool is an int subclass, but never a valid offset
		elif isinstance(start_at, bool) or not isinstance(start_at, int) or start_at < 0:
			raise ValueError("invalid start_at " + repr(start_at))

		return SerializedNumberer(values, start_at)

	def __eq__(self, other):
		if not isinstance(other, SerializedNumberer):
			return NotImplemented

		return self.values == other.values and self.start_at == other.start_at

	__hash__ = None

	def __repr__(self):
		return "SerializedNumberer(values=" + repr(self.values) + ", start_at=" + str(self.start_at) + ")"


def dumps(numberer, config=None):
	if config is None:
		config = DefaultConfig()

	return json.dumps(SerializedNumberer.from_numberer(numberer).to_dict(),
					  indent=config.json_indent,
					  ensure_ascii=config.ensure_ascii)


def loads(text, config=None):
	return SerializedNumberer.from_dict(json.loads(text)).to_numberer(config)
