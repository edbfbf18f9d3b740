"""Canned TextRazor responses and a fake transport shared by the test modules."""

import urllib.error

TEST_API_KEY = "1234567890"

TEST_URL = "https://news.google.com"
TEST_TEXT = (
    "Barclays misled shareholders and the public about one of the biggest "
    "investments in the bank's history, a BBC Panorama investigation has found."
)

ERROR_RESPONSE_BODY = """{
    "ok": false,
    "response": {
    }
}"""

ANALYZE_RESPONSE_BODY = """{
    "response": {
        "sentences": [
            {
                "position": 0,
                "words": [
                    {"position": 0, "startingPos": 0, "endingPos": 3, "stem": "bbc",
                     "lemma": "bbc", "token": "BBC", "partOfSpeech": "NNP"},
                    {"position": 1, "startingPos": 3, "endingPos": 3, "stem": ".",
                     "lemma": ".", "token": ".", "partOfSpeech": "."}
                ]
            }
        ],
        "language": "eng",
        "languageIsReliable": true,
        "entities": [
            {
                "id": 0,
                "type": ["Agent", "Organisation", "Company", "Broadcaster", "TelevisionStation"],
                "matchingTokens": [0],
                "entityId": "BBC",
                "freebaseTypes": ["/film/film_distributor", "/tv/tv_network"],
                "confidenceScore": 1.726,
                "wikiLink": "http://en.wikipedia.org/wiki/BBC",
                "matchedText": "BBC",
                "freebaseId": "/m/0ncl8zk",
                "relevanceScore": 0,
                "entityEnglishId": "BBC",
                "startingPos": 0,
                "endingPos": 3,
                "wikidataId": "Q9531"
            }
        ]
    },
    "time": 0.003359,
    "ok": true
}"""

ACCOUNT_RESPONSE_BODY = """{
    "ok": true,
    "response": {
        "requestsUsedToday": 17,
        "concurrentRequestsUsed": 0,
        "concurrentRequestLimit": 2,
        "plan": "FREE",
        "planDailyRequestsIncluded": 500
    }
}"""

DICT_CREATE_BODY = '{"time":0.004913,"ok":true}'
DICT_DELETE_BODY = '{"time":0.004913,"ok":true}'
DICT_LIST_BODY = (
    '{"dictionaries":[{"id":"test_ents","matchType":"TOKEN","caseInsensitive":true,'
    '"language":"eng"}],"time":0.002655,"ok":true}'
)
DICT_GET_BODY = (
    '{"response":{"id":"test_ents","matchType":"TOKEN","caseInsensitive":true,'
    '"language":"eng"},"time":0.002503,"ok":true}'
)
DICT_ENTRIES_BODY = (
    '{"response":{"offset":0,"limit":20,"total":1,"entries":[{"id":"DEV2",'
    '"text":"Bjarne Stroustrup","data":{}}]},"time":0.005158,"ok":true}'
)
DICT_ENTRY_BODY = (
    '{"response":{"id":"DEV2","text":"Bjarne Stroustrup","data":{}},"time":0.001278,"ok":true}'
)

CAT_CREATE_BODY = '{"time":0.007047,"ok":true}'
CAT_LIST_BODY = """{
    "response": {
        "id": "sport2",
        "offset": 0,
        "limit": 20,
        "total": 3,
        "lastUpdated": 1489517818,
        "categories": [
            {"categoryId": "100", "label": "Golf", "query": "concept('sport>golf')"},
            {"categoryId": "101", "label": "Squash", "query": "concept('sport>squash')"},
            {"categoryId": "102", "label": "Cricket", "query": "concept('sport>cricket')"}
        ]
    },
    "time": 0.00612,
    "ok": true
}"""
CAT_GET_BODY = (
    '{"response":{"categoryId":"100","label":"Golf","query":"concept(\'sport>golf\')"},'
    '"time":0.00153,"ok":true}'
)
CAT_DELETE_BODY = '{"time":0.003754,"ok":true}'

CAT_JSON = """[
{"categoryId":"100","label":"Golf","query":"concept('sport>golf')"},
{"categoryId":"101","label":"Squash","query":"concept('sport>squash')"},
{"categoryId":"102","label":"Cricket","query":"concept('sport>cricket')"}
]
"""
CAT_CSV = """100,Golf,concept('sport>golf')
101,Squash,concept('sport>squash')
102,Cricket,concept('sport>cricket')
"""


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------

FAKE_READ_ISSUE = object()


class FakeResponse:
    def __init__(self, status, body, headers=None):
        self.status = status
        self.reason = "OK" if status == 200 else "Error"
        self.headers = headers if headers is not None else {"Content-Type": "application/json"}
        self._body = body
        self.closed = False

    def read(self, amt=None):
        if self._body is FAKE_READ_ISSUE:
            raise OSError("expected error")
        data = self._body.encode("utf-8") if isinstance(self._body, str) else self._body
        if amt is not None:
            return data[:amt]
        return data

    def close(self):
        self.closed = True


class FakeTransport:
    """Minimal transport returning a canned response and recording requests."""

    def __init__(self, status=200, body="", fail=False, headers=None):
        self.status = status
        self.body = body
        self.fail = fail
        self.headers = headers
        self.requests = []
        self.timeouts = []
        self.responses = []

    def open(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.fail:
            raise urllib.error.URLError("expected error")
        resp = FakeResponse(self.status, self.body, self.headers)
        self.responses.append(resp)
        return resp

    @property
    def last_request(self):
        return self.requests[-1]
