import numpy as np


# maps values to their numbers
# when unknown is None, values that weren't encountered before are added to the numberer,
# otherwise the numberer is left untouched and they are mapped to unknown
def encode(numberer, values, unknown=None, dtype=np.int32):
	if unknown is None:
		ids = [numberer.add(value) for value in values]
	else:
		ids = list()
		for value in values:
			n = numberer.number(value)
			ids.append(unknown if n is None else n)

	return np.asarray(ids, dtype=dtype)


def decode(numberer, ids):
	values = list()
	for n in ids:
		n = int(n)
		# None is a valid value, so the range is checked explicitly
		if n < numberer.start_at or n >= numberer.size():
			raise KeyError("number " + str(n) + " is not in [" + str(numberer.start_at) + ", " + str(numberer.size()) + ")")

		values.append(numberer.value(n))

	return values


# one row per id, one column per number the numberer can currently hand out
# reserved numbers below start_at get their own (always empty) columns
def one_hot(numberer, ids, dtype=np.int32):
	ids = np.asarray(ids, dtype=np.int64)
	matrix = np.zeros(shape=(len(ids), numberer.size()), dtype=dtype)

	if len(ids) > 0:
		if ids.min() < 0 or ids.max() >= numberer.size():
			raise KeyError("number out of range [0, " + str(numberer.size()) + ")")

		matrix[np.arange(len(ids)), ids] = 1

	return matrix


# adds a batch of values, e.g. a pretrained vocabulary whose numbers double as indices into an embedding matrix
# returns the range of numbers handed out by this call: [first, end)
def reserve(numberer, values):
	first = numberer.size()
	for value in values:
		numberer.add(value)

	return (first, numberer.size())
