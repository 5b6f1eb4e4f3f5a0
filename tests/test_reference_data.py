from schedule_admin.allocation.models import Course, Professor
from schedule_admin.allocation.reference_data import ReferenceData, ReferenceDataLoader

PROFESSORS = [{'id': 1, 'name': 'Ada'}, {'id': 2, 'name': 'Alan'}]
COURSES = [{'id': 7, 'name': 'Algorithms'}]


def test_load_all_fills_both_slots(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', body=PROFESSORS)
    fake_api.on('GET', '/courses', body=COURSES)

    reference = ReferenceDataLoader(api_client, notifier).load_all(ReferenceData())

    assert reference.professors == [Professor(1, 'Ada'), Professor(2, 'Alan')]
    assert reference.courses == [Course(7, 'Algorithms')]
    assert notifier.messages == []
    assert sorted(fake_api.calls()) == [('GET', '/courses'), ('GET', '/professors')]


def test_professor_failure_does_not_block_courses(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', status_code=500, body={'message': 'Professors unavailable'})
    fake_api.on('GET', '/courses', body=COURSES)

    reference = ReferenceDataLoader(api_client, notifier).load_all(ReferenceData())

    assert reference.professors == []
    assert reference.courses == [Course(7, 'Algorithms')]
    assert notifier.messages == [('error', 'Professors unavailable')]


def test_both_failures_are_reported_separately(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', status_code=503)
    fake_api.on('GET', '/courses', status_code=500, body={'message': 'Courses unavailable'})

    ReferenceDataLoader(api_client, notifier).load_all(ReferenceData())

    assert notifier.messages == [
        ('error', 'Request failed with status code 503'),
        ('error', 'Courses unavailable'),
    ]


def test_success_replaces_slot_in_full(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', body=[{'id': 9, 'name': 'Grace'}])
    fake_api.on('GET', '/courses', body=[])
    reference = ReferenceData(professors=[Professor(1, 'Old')], courses=[Course(3, 'Old')])

    ReferenceDataLoader(api_client, notifier).load_all(reference)

    assert reference.professors == [Professor(9, 'Grace')]
    assert reference.courses == []


def test_name_lookup():
    reference = ReferenceData(professors=[Professor(1, 'Ada')], courses=[Course(7, 'Algorithms')])
    assert reference.professor_name(1) == 'Ada'
    assert reference.course_name(7) == 'Algorithms'
    assert reference.professor_name(99) == ''


# ==================== Unexpected response bodies ====================

def test_unexpected_professor_body_is_reported_and_courses_still_load(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', body={'message': 'unexpected envelope'})
    fake_api.on('GET', '/courses', body=COURSES)

    reference = ReferenceDataLoader(api_client, notifier).load_all(ReferenceData())

    assert reference.professors == []
    assert reference.courses == [Course(7, 'Algorithms')]
    assert notifier.messages == [('error', 'Unexpected response from /professors')]


def test_course_list_with_non_object_items_is_reported(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', body=PROFESSORS)
    fake_api.on('GET', '/courses', body=['Algorithms', 7])

    reference = ReferenceDataLoader(api_client, notifier).load_all(ReferenceData())

    assert reference.professors == [Professor(1, 'Ada'), Professor(2, 'Alan')]
    assert reference.courses == []
    assert notifier.messages == [('error', 'Unexpected response from /courses')]


def test_malformed_item_fields_are_reported(api_client, fake_api, notifier):
    fake_api.on('GET', '/professors', body=[{'id': 'not-a-number', 'name': 'Ada'}])
    fake_api.on('GET', '/courses', body=COURSES)

    reference = ReferenceDataLoader(api_client, notifier).load_all(ReferenceData())

    assert reference.professors == []
    assert reference.courses == [Course(7, 'Algorithms')]
    assert notifier.messages == [('error', 'Unexpected response from /professors')]
