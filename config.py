class DefaultConfig:
	def __init__(self):
		self.reject_duplicates = False		# when true, importing a serialized numberer with repeated values fails
		self.warn_on_duplicates = True		# otherwise, the last occurrence of a repeated value keeps its id

		self.json_indent = None
		self.ensure_ascii = False


	def print(self):
		print("Config:\t" + str(vars(self)))
		print("\n\n")
