"""
Jet's notion of a name-space: a flat table from identifiers to storage slots.
There is no nesting. A lambda body gets a fresh table of its own,
which is exactly why a lambda cannot see the variables around it.
"""
from typing import Optional
from .ontology import Phrase, Nom

class AlreadyExists(KeyError): pass

class SlotTable:
	"""
	Lightly enhanced dictionary: It does not like duplicate keys,
	and it hands out dense addresses in order of definition.
	Addresses are never reused, so the size is also the frame size.
	"""
	_locate: dict[str, Phrase]
	_address: dict[str, int]

	def __init__(self):
		self._locate, self._address = {}, {}

	def __contains__(self, key: str) -> bool:
		return key in self._address

	def __len__(self):
		return len(self._address)

	def address(self, key: str) -> Optional[int]:
		return self._address.get(key)

	def locate(self, key: str) -> Phrase:
		return self._locate[key]

	def define(self, nom: Nom) -> int:
		key = nom.key()
		if key in self._address:
			raise AlreadyExists(key)
		self._locate[key] = nom
		self._address[key] = address = len(self._address)
		return address
