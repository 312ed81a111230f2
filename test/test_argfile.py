#!/usr/bin/env python

import os
import unittest

from test_base_interceptor import BaseInterceptorTest

from cinterceptor.argfile import (ResponseFileRef, RewriteOutcome,
                                  rewriteResponseFile, stripMarker)


class StripMarkerTest(unittest.TestCase):

    def test_marker_is_stripped(self):
        self.assertEqual(stripMarker('@Temp/UnityTempFile-1'), (True, 'Temp/UnityTempFile-1'))

    def test_no_marker(self):
        self.assertEqual(stripMarker('Temp/UnityTempFile-1'), (False, 'Temp/UnityTempFile-1'))

    def test_only_one_marker_is_stripped(self):
        self.assertEqual(stripMarker('@@args'), (True, '@args'))

    def test_marker_in_the_middle_is_kept(self):
        self.assertEqual(stripMarker('dir/@args'), (False, 'dir/@args'))

    def test_reference_keeps_both_variants(self):
        ref = ResponseFileRef('@path/to/file')
        self.assertEqual(ref.original, '@path/to/file')
        self.assertEqual(ref.path, 'path/to/file')
        self.assertTrue(ref.hadMarker)


class RewriteResponseFileTest(BaseInterceptorTest):
    """
    Checks the in place rewrite of the response file
    """

    def rewrite(self, original='@path/to/file'):
        return rewriteResponseFile(ResponseFileRef(original), 'compiler_args.txt', 'copy.txt')

    def test_missing_args_file_leaves_response_file_alone(self):
        """
        Without compiler_args.txt nothing is touched
        :return:
        """
        self.write_file('path/to/file', b'-debug\r\n-target:library\r\n')
        (outcome, _) = self.rewrite()
        self.assertEqual(outcome, RewriteOutcome.SKIPPED)
        self.assertEqual(self.read_file('path/to/file'), b'-debug\r\n-target:library\r\n')
        self.assertFalse(os.path.exists('copy.txt'))

    def test_extras_are_appended_verbatim(self):
        """
        The response file ends up as the original content immediately followed by the extras
        :return:
        """
        self.write_file('path/to/file', b'-debug\r\n-out:Temp/Assembly-CSharp.dll')
        self.write_file('compiler_args.txt', b'-define:MY_SYMBOL\n-warnaserror+')
        (outcome, _) = self.rewrite()
        self.assertEqual(outcome, RewriteOutcome.REWRITTEN)
        expected = b'-debug\r\n-out:Temp/Assembly-CSharp.dll-define:MY_SYMBOL\n-warnaserror+'
        self.assertEqual(self.read_file('path/to/file'), expected)
        self.assertEqual(self.read_file('copy.txt'), expected)

    def test_marker_never_reaches_the_filesystem(self):
        """
        A file literally named with the marker must not be the one rewritten
        :return:
        """
        self.write_file('@args.rsp', b'decoy')
        self.write_file('args.rsp', b'real')
        self.write_file('compiler_args.txt', b' -extra')
        self.rewrite('@args.rsp')
        self.assertEqual(self.read_file('args.rsp'), b'real -extra')
        self.assertEqual(self.read_file('@args.rsp'), b'decoy')

    def test_copy_is_overwritten(self):
        self.write_file('path/to/file', b'A')
        self.write_file('compiler_args.txt', b'B')
        self.write_file('copy.txt', b'something much longer from a previous run')
        self.rewrite()
        self.assertEqual(self.read_file('copy.txt'), b'AB')

    def test_empty_files(self):
        self.write_file('path/to/file', b'')
        self.write_file('compiler_args.txt', b'')
        (outcome, _) = self.rewrite()
        self.assertEqual(outcome, RewriteOutcome.REWRITTEN)
        self.assertEqual(self.read_file('path/to/file'), b'')
        self.assertEqual(self.read_file('copy.txt'), b'')

    def test_missing_response_file_is_reported(self):
        """
        A response file that is not there is a failure, not an exception
        :return:
        """
        self.write_file('compiler_args.txt', b'-extra')
        (outcome, reason) = self.rewrite('@nowhere.rsp')
        self.assertEqual(outcome, RewriteOutcome.FAILED)
        self.assertIn('nowhere.rsp', reason)
        self.assertFalse(os.path.exists('nowhere.rsp'))
        self.assertFalse(os.path.exists('copy.txt'))

    def test_failed_copy_leaves_rewritten_file(self):
        """
        When the last step fails the response file keeps the state it reached
        :return:
        """
        self.write_file('path/to/file', b'Y')
        self.write_file('compiler_args.txt', b'X')
        os.mkdir('copy.txt')
        (outcome, _) = self.rewrite()
        self.assertEqual(outcome, RewriteOutcome.FAILED)
        self.assertEqual(self.read_file('path/to/file'), b'YX')

    def test_unusable_path_is_reported(self):
        """
        Errors other than OSError from the filesystem calls are failures too
        :return:
        """
        self.write_file('compiler_args.txt', b'X')
        (outcome, reason) = self.rewrite('@bad\x00name')
        self.assertEqual(outcome, RewriteOutcome.FAILED)
        self.assertIn('null', reason)

    def test_rewrite_is_not_idempotent(self):
        """
        Each run appends the extras again, so a reused response file keeps growing
        :return:
        """
        self.write_file('path/to/file', b'Y')
        self.write_file('compiler_args.txt', b'X')
        self.rewrite()
        self.assertEqual(self.read_file('path/to/file'), b'YX')
        self.rewrite()
        self.assertEqual(self.read_file('path/to/file'), b'YXX')
        self.assertEqual(self.read_file('copy.txt'), b'YXX')


if __name__ == '__main__':
    unittest.main()
