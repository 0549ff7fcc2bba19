"""
Global pytest configuration and fixtures.
"""

import copy

import pytest


TRAIN_657 = {
    "routeName": "Keystone",
    "trainNum": 657,
    "trainID": "657-30",
    "lat": 40.14815944794739,
    "lon": -76.61796031144218,
    "trainTimely": "NaN Minutes Early",
    "stations": [
        {
            "name": "New York Penn",
            "code": "NYP",
            "tz": "America/New_York",
            "bus": False,
            "schArr": "2023-08-29T20:30:00-04:00",
            "schDep": "2023-08-29T20:30:00-04:00",
            "arr": "2023-08-29T20:30:00-04:00",
            "dep": "2023-08-29T20:30:00-04:00",
            "arrCmnt": "0 Minutes Early",
            "depCmnt": "0 Minutes Early",
            "status": "Departed",
        },
        {
            "name": "Middletown",
            "code": "MID",
            "tz": "America/New_York",
            "bus": False,
            "schArr": "2023-08-29T23:42:00-04:00",
            "schDep": "2023-08-29T23:42:00-04:00",
            "arr": "2023-08-29T23:42:00-04:00",
            "dep": "2023-08-29T23:42:00-04:00",
            "arrCmnt": "NaN Minutes Early",
            "depCmnt": "NaN Minutes Early",
            "status": "Enroute",
        },
        {
            "name": "Harrisburg",
            "code": "HAR",
            "tz": "America/New_York",
            "bus": False,
            "schArr": "2023-08-29T23:56:00-04:00",
            "schDep": "2023-08-29T23:56:00-04:00",
            "arr": None,
            "arrCmnt": "NaN Minutes Early",
            "depCmnt": "NaN Minutes Early",
            "status": "Station",
        },
    ],
    "heading": "W",
    "eventCode": "MID",
    "eventTZ": "America/New_York",
    "eventName": "Middletown",
    "origCode": "NYP",
    "originTZ": "America/New_York",
    "origName": "New York Penn",
    "destCode": "HAR",
    "destTZ": "America/New_York",
    "destName": "Harrisburg",
    "trainState": "Active",
    "velocity": 51.2444686889648,
    "statusMsg": " ",
    "createdAt": "2023-08-29T23:39:50-04:00",
    "updatedAt": "2023-08-29T23:39:50-04:00",
    "lastValTS": "2023-08-29T23:39:34-04:00",
    "objectID": 847,
}

STATION_ABE = {
    "name": "Aberdeen",
    "code": "ABE",
    "tz": "America/New_York",
    "lat": 39.508447,
    "lon": -76.16326,
    "address1": "18 East Bel Air Avenue",
    "address2": " ",
    "city": "Aberdeen",
    "state": "MD",
    "zip": "21001",
    "trains": [],
}

STATION_PHL = {
    "name": "Philadelphia 30th Street",
    "code": "PHL",
    "tz": "America/New_York",
    "lat": 39.955615,
    "lon": -75.182028,
    "address1": "2955 Market Street",
    "address2": " ",
    "city": "Philadelphia",
    "state": "PA",
    "zip": "19104",
    "trains": ["657-30", "612-5"],
}


@pytest.fixture
def train_payload():
    """Provide a single Keystone train object."""
    return copy.deepcopy(TRAIN_657)


@pytest.fixture
def trains_payload(train_payload):
    """Provide a `/trains` response body with one train."""
    return {"657": [train_payload]}


@pytest.fixture
def station_payload():
    """Provide a single station object."""
    return copy.deepcopy(STATION_ABE)


@pytest.fixture
def stations_payload():
    """Provide a `/stations` response body with two stations."""
    return {"ABE": copy.deepcopy(STATION_ABE), "PHL": copy.deepcopy(STATION_PHL)}
