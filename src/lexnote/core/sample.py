# src/lexnote/core/sample.py
"""
Notebook shipped with the app, used when no file is given.
"""

SAMPLE_NOTEBOOK = (
    "01apple ˈæp.əl&4a round fruit with red or green skin$$the tree that bears this fruit"
    "&6having the colour of a ripe apple"
    "E01run rʌn&5to move quickly on foot$$to operate or function$$to manage a business"
    "$$to flow, as water does$$to be a candidate in an election&4an act of running"
    "E01the ðə&8used before nouns to mean something already known"
    "E01oh əʊ&2said to express surprise"
    "E01etc. ˌet ˈset.ər.ə&3and so on"
    "E01she ʃiː&7a female person or animal already mentioned"
    "E01Paris ˈpær.ɪs&1the capital city of France"
    "E01词语 cíyǔ&4word$$term&9a unit of language"
    "E"
)
