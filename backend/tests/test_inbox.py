import unittest
from types import SimpleNamespace

from backend.messaging.views import build_inbox


def user(user_id, name):
    return SimpleNamespace(id=user_id, name=name)


def message(sender, receiver, seen=False):
    return SimpleNamespace(sender=sender, sender_id=sender.id,
                           receiver=receiver, receiver_id=receiver.id, seen=seen)


class BuildInboxTests(unittest.TestCase):
    def setUp(self):
        self.me = user(1, 'Me')
        self.ravi = user(2, 'Ravi')
        self.meera = user(3, 'Meera')

    def test_unread_only_counts_received_messages(self):
        messages = [
            message(self.me, self.ravi, seen=False),
            message(self.ravi, self.me, seen=True),
        ]
        self.assertEqual(build_inbox(messages, 1), [{'userId': 2, 'name': 'Ravi', 'hasUnread': False}])

    def test_any_unseen_received_message_flags_conversation(self):
        messages = [
            message(self.ravi, self.me, seen=True),
            message(self.meera, self.me, seen=True),
            message(self.ravi, self.me, seen=False),
        ]
        inbox = build_inbox(messages, 1)
        self.assertEqual([c['userId'] for c in inbox], [2, 3])
        self.assertTrue(inbox[0]['hasUnread'])
        self.assertFalse(inbox[1]['hasUnread'])

    def test_empty(self):
        self.assertEqual(build_inbox([], 1), [])


if __name__ == '__main__':
    unittest.main()
