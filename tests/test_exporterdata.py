from scopeview.exporterdata import (
    ChannelConfig,
    ChannelData,
    ExporterData,
    SampleValues,
    ScopeConfig,
)


def make_scope(v_used, s_used):
    return ScopeConfig(
        voltage=[ChannelConfig(f"CH{i + 1}", u) for i, u in enumerate(v_used)],
        spectrum=[ChannelConfig(f"SP{i + 1}", u) for i, u in enumerate(s_used)],
    )


def test_voltage_only():
    scope = make_scope([True, True], [False, False])
    data = [
        ChannelData(voltage=SampleValues([1.0, 2.0, 3.0], 0.5)),
        ChannelData(voltage=SampleValues([4.0], 0.25)),
    ]
    dto = ExporterData.from_result(data, scope)
    assert dto.channels_count == 2
    assert dto.max_row == 3
    assert dto.spectrum_used is False
    assert dto.time_interval == 0.25
    assert dto.freq_interval == 0.0
    assert dto.voltage_data[0] is data[0].voltage
    assert dto.spectrum_data == (None, None)


def test_unused_and_missing_channels():
    scope = make_scope([True, False, True], [False, True, False])
    data = [
        None,
        ChannelData(voltage=SampleValues([1.0] * 9, 1.0), spectrum=SampleValues([2.0] * 4, 3.0)),
    ]
    dto = ExporterData.from_result(data, scope)
    assert dto.voltage_data == (None, None, None)
    assert dto.spectrum_data[1] is data[1].spectrum
    assert dto.spectrum_used is True
    assert dto.max_row == 4
    assert dto.freq_interval == 3.0


def test_max_row_covers_spectrum():
    scope = make_scope([True], [True])
    data = [ChannelData(SampleValues([0.0] * 2, 1.0), SampleValues([0.0] * 7, 2.0))]
    dto = ExporterData.from_result(data, scope)
    assert dto.max_row == max(len(data[0].voltage.samples), len(data[0].spectrum.samples))


def test_no_channels():
    dto = ExporterData.from_result([], ScopeConfig())
    assert dto.channels_count == 0
    assert dto.max_row == 0
    assert dto.voltage_data == ()