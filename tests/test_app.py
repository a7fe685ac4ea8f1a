import pytest

from spectro_color.app import create_app, describe, parse_ranges


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_describe_label_contrast():
    assert describe("#ffffff")["text"] == "#000000"
    assert describe("#000000")["text"] == "#ffffff"
    assert describe("#ff8000")["css"].startswith("rgb(")


def test_parse_ranges():
    assert parse_ranges("425-435, 657.5-667") == [(425.0, 435.0), (657.5, 667.0)]
    assert parse_ranges("") == []
    with pytest.raises(ValueError):
        parse_ranges("425")
    with pytest.raises(ValueError):
        parse_ranges("a-b")


def test_bands(client):
    data = client.get("/bands").get_json()
    assert [b["name"] for b in data] == [
        "violet",
        "blue",
        "cyan",
        "green",
        "yellow",
        "orange",
        "red",
    ]


def test_color(client):
    data = client.get("/color?wavelength=450").get_json()
    assert data["band"] == "blue"
    assert data["mode"] == "ideal"
    assert data["absorbed"]["hex"] == "#0033ff"
    assert data["observed"]["hex"] == "#ff8000"

    data = client.get("/color?wavelength=450&mode=real").get_json()
    assert data["observed"]["hex"] == "#ffcc00"


def test_color_at_780_has_no_band(client):
    data = client.get("/color?wavelength=780").get_json()
    assert data["band"] is None
    assert data["observed"]["hex"] == "#ffffff"


@pytest.mark.parametrize(
    "query",
    [
        "/color",
        "/color?wavelength=abc",
        "/color?wavelength=900",
        "/color?wavelength=450&mode=fancy",
    ],
)
def test_color_bad_request(client, query):
    resp = client.get(query)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_observed_ranges(client):
    data = client.get("/observed?ranges=425-435,657-667").get_json()
    assert data["observed"]["hex"] == "#80ff80"
    assert client.get("/observed").get_json()["observed"]["hex"] == "#ffffff"


def test_observed_wavelengths(client):
    data = client.get("/observed?wavelengths=430,662").get_json()
    assert data["observed"]["hex"] == "#80ff80"


@pytest.mark.parametrize(
    "query",
    [
        "/observed?ranges=425-430",  # too narrow
        "/observed?ranges=425-450,440-470",  # overlapping
        "/observed?wavelengths=430,x",
        "/observed?wavelengths=200",
    ],
)
def test_observed_bad_request(client, query):
    assert client.get(query).status_code == 400


def test_mix_spectrum(client):
    assert client.get("/mix/spectrum").get_json()["color"]["hex"] == "#ffffff"
    data = client.get("/mix/spectrum?exclude=380-780&step=5").get_json()
    assert data["color"]["hex"] == "#000000"
    assert client.get("/mix/spectrum?step=0").status_code == 400
    assert client.get("/mix/spectrum?step=x").status_code == 400


def test_mix_disk(client):
    everything = "violet,indigo,blue,green,yellow,orange,red"
    data = client.get(f"/mix/disk?colors={everything}").get_json()
    assert data["color"]["hex"] == "#ffffff"
    data = client.get(f"/mix/disk?colors={everything}&mode=real").get_json()
    assert data["color"]["hex"] == "#8c5b5b"
    assert client.get("/mix/disk").get_json()["color"]["hex"] == "#000000"
    assert client.get("/mix/disk?colors=pink").status_code == 400


def test_spectrum(client):
    assert len(client.get("/spectrum?width=10").get_json()) == 10
    assert len(client.get("/spectrum").get_json()) == 400
    assert len(client.get("/spectrum?width=100000").get_json()) == 1024
    assert client.get("/spectrum?width=wide").status_code == 400


def test_examples(client):
    data = client.get("/examples").get_json()
    assert len(data) == 5
    carotene = data[0]
    assert carotene["observed"]["hex"] == carotene["appears"]["hex"] == "#ff8000"


def test_default_mode_from_config():
    client = create_app({"SPECTRO_DEFAULT_MODE": "real"}).test_client()
    data = client.get("/color?wavelength=450").get_json()
    assert data["observed"]["hex"] == "#ffcc00"


def test_bad_default_mode():
    with pytest.raises(ValueError):
        create_app({"SPECTRO_DEFAULT_MODE": "fancy"})


def test_unknown_route_is_404(client):
    assert client.get("/nope").status_code == 404


@pytest.mark.parametrize("step", ["0.0000000001", "0.1", "1000", "nan"])
def test_mix_spectrum_step_out_of_bounds(client, step):
    resp = client.get(f"/mix/spectrum?step={step}")
    assert resp.status_code == 400
    assert "step" in resp.get_json()["error"]


def test_mix_spectrum_coarse_band_not_white(client):
    data = client.get("/mix/spectrum?exclude=500-510&step=5").get_json()
    assert data["color"]["hex"] not in ("#ffffff", "#000000")


def test_observed_duplicate_wavelength(client):
    resp = client.get("/observed?wavelengths=450,450")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "This wavelength is already added"


def test_mix_disk_blend(client):
    colors = "red,green"
    data = client.get(f"/mix/disk?colors={colors}&blend=0").get_json()
    assert data["segments"] == ["#00ff00", "#ff0000"]
    data = client.get(f"/mix/disk?colors={colors}&blend=1").get_json()
    assert data["segments"] == [data["color"]["hex"]] * 2
    assert "segments" not in client.get(f"/mix/disk?colors={colors}").get_json()
    assert client.get(f"/mix/disk?colors={colors}&blend=2").status_code == 400
    assert client.get(f"/mix/disk?colors={colors}&blend=x").status_code == 400
