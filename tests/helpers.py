import json


def make_document(blocks, meta=None):
    return {
        "pandoc-api-version": [1, 23],
        "meta": {} if meta is None else meta,
        "blocks": blocks,
    }


def org_block(text):
    return {"t": "RawBlock", "c": ["org", text]}


def json_block(payload):
    if not isinstance(payload, str):
        payload = json.dumps(payload)
    return {"t": "RawBlock", "c": ["json", payload]}


def para(text):
    return {"t": "Para", "c": [{"t": "Str", "c": text}]}
