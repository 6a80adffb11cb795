"""Built-in catalog of well-known JDK types."""

from __future__ import annotations

BUILTIN_CATALOG_SOURCE = "builtin"

# Only the ancestry matters for these types: terminal names and the
# Iterable/Collection chain are what sample resolution looks at.
BUILTIN_CATALOG_TEXT = """
types:
  Object: {}
  Serializable: {}
  Cloneable: {}
  Comparable:
    type_parameters: [T]
  CharSequence: {}
  String:
    extends: [Object, Serializable, "Comparable<String>", CharSequence]
  Character:
    extends: [Object, Serializable, "Comparable<Character>"]
  Boolean:
    extends: [Object, Serializable, "Comparable<Boolean>"]
  Number:
    extends: [Object, Serializable]
  Byte:
    extends: [Number, "Comparable<Byte>"]
  Short:
    extends: [Number, "Comparable<Short>"]
  Integer:
    extends: [Number, "Comparable<Integer>"]
  Long:
    extends: [Number, "Comparable<Long>"]
  Float:
    extends: [Number, "Comparable<Float>"]
  Double:
    extends: [Number, "Comparable<Double>"]
  BigInteger:
    extends: [Number, "Comparable<BigInteger>"]
  BigDecimal:
    extends: [Number, "Comparable<BigDecimal>"]
  UUID:
    extends: [Object, Serializable, "Comparable<UUID>"]
  Date:
    extends: [Object, Serializable, Cloneable, "Comparable<Date>"]
  Timestamp:
    extends: [Date]
  Temporal: {}
  TemporalAccessor: {}
  LocalDate:
    extends: [Object, Temporal, TemporalAccessor, Serializable]
  LocalTime:
    extends: [Object, Temporal, TemporalAccessor, Serializable]
  LocalDateTime:
    extends: [Object, Temporal, TemporalAccessor, Serializable]
  Instant:
    extends: [Object, Temporal, TemporalAccessor, Serializable]
  OffsetDateTime:
    extends: [Object, Temporal, TemporalAccessor, Serializable]
  ZonedDateTime:
    extends: [Object, Temporal, TemporalAccessor, Serializable]
  Iterable:
    type_parameters: [T]
  Collection:
    type_parameters: [E]
    extends: ["Iterable<E>"]
  List:
    type_parameters: [E]
    extends: ["Collection<E>"]
  Set:
    type_parameters: [E]
    extends: ["Collection<E>"]
  SortedSet:
    type_parameters: [E]
    extends: ["Set<E>"]
  Queue:
    type_parameters: [E]
    extends: ["Collection<E>"]
  Deque:
    type_parameters: [E]
    extends: ["Queue<E>"]
  ArrayList:
    type_parameters: [E]
    extends: ["List<E>", Cloneable, Serializable]
  LinkedList:
    type_parameters: [E]
    extends: ["List<E>", "Deque<E>", Cloneable, Serializable]
  HashSet:
    type_parameters: [E]
    extends: ["Set<E>", Cloneable, Serializable]
  LinkedHashSet:
    type_parameters: [E]
    extends: ["HashSet<E>"]
  TreeSet:
    type_parameters: [E]
    extends: ["SortedSet<E>", Cloneable, Serializable]
  Map:
    type_parameters: [K, V]
  HashMap:
    type_parameters: [K, V]
    extends: ["Map<K, V>", Cloneable, Serializable]
  LinkedHashMap:
    type_parameters: [K, V]
    extends: ["HashMap<K, V>"]
  TreeMap:
    type_parameters: [K, V]
    extends: ["Map<K, V>", Cloneable, Serializable]
  Optional:
    type_parameters: [T]
"""
